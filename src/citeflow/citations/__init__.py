"""Citation subsystem: detecting parenthesised citation links."""

from .coerce import coerce_inline_nodes, parse_inline_nodes
from .detector import detect_and_strip_citations

__all__ = [
    "coerce_inline_nodes",
    "detect_and_strip_citations",
    "parse_inline_nodes",
]

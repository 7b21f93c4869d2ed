"""
Public API for the citeflow package.
"""

from .citations import coerce_inline_nodes, detect_and_strip_citations, parse_inline_nodes
from .flow import build_link_flow, citation_flow
from .markdown import parse_inline_paragraphs
from .models import (
    CitationDetection,
    FlowItem,
    FlowLink,
    FlowText,
    InlineNode,
    Link,
    Text,
)

__all__ = [
    "detect_and_strip_citations",
    "coerce_inline_nodes",
    "parse_inline_nodes",
    "build_link_flow",
    "citation_flow",
    "parse_inline_paragraphs",
    "CitationDetection",
    "FlowItem",
    "FlowLink",
    "FlowText",
    "InlineNode",
    "Link",
    "Text",
]

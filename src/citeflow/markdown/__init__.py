from .parser import (
    create_parser,
    get_parser,
    inline_nodes_from_tree,
    parse_inline_paragraphs,
    parse_markdown,
)

__all__ = [
    "create_parser",
    "get_parser",
    "inline_nodes_from_tree",
    "parse_inline_paragraphs",
    "parse_markdown",
]

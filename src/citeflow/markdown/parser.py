"""Markdown parsing using markdown-it-py.

Produces the inline node sequences the citation pass works on:
- CommonMark base
- GFM tables and strikethrough
"""

from __future__ import annotations

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from ..logging import logger
from ..models.inline import (
    Code,
    Emphasis,
    Html,
    Image,
    InlineNode,
    LineBreak,
    Link,
    SoftBreak,
    Strikethrough,
    Strong,
    Text,
)

_CONTAINERS = {
    "em": Emphasis,
    "strong": Strong,
    "s": Strikethrough,
}


def create_parser() -> MarkdownIt:
    """Create configured markdown-it parser."""
    md = MarkdownIt("commonmark")
    md.enable("table")
    md.enable("strikethrough")
    return md


# Singleton parser instance
_parser: MarkdownIt | None = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse markdown text into AST.

    Args:
        text: Markdown text to parse

    Returns:
        Root SyntaxTreeNode of the AST
    """
    parser = get_parser()
    tokens = parser.parse(text)
    return SyntaxTreeNode(tokens)


def parse_inline_paragraphs(text: str) -> list[list[InlineNode]]:
    """Return one inline node sequence per inline block, in document order.

    Paragraphs, headings and table cells each contribute one sequence.
    """
    root = parse_markdown(text)
    return [inline_nodes_from_tree(node) for node in root.walk() if node.type == "inline"]


def inline_nodes_from_tree(node: SyntaxTreeNode) -> list[InlineNode]:
    """Convert the children of a markdown-it tree node into inline nodes.

    Adjacent text runs are merged so that one run of prose is one text node.
    """
    nodes: list[InlineNode] = []
    for child in node.children:
        converted = _convert(child)
        if isinstance(converted, Text) and nodes and isinstance(nodes[-1], Text):
            nodes[-1] = Text(content=nodes[-1].content + converted.content)
        else:
            nodes.append(converted)
    return nodes


def _convert(node: SyntaxTreeNode) -> InlineNode:
    node_type = node.type

    if node_type in ("text", "text_special"):
        return Text(content=node.content)
    if node_type == "link":
        return Link(
            destination=_attr(node, "href"),
            children=tuple(inline_nodes_from_tree(node)),
        )
    if node_type == "softbreak":
        return SoftBreak()
    if node_type == "hardbreak":
        return LineBreak()
    if node_type == "code_inline":
        return Code(content=node.content)
    if node_type == "html_inline":
        return Html(content=node.content)
    if node_type in _CONTAINERS:
        return _CONTAINERS[node_type](children=tuple(inline_nodes_from_tree(node)))
    if node_type == "image":
        return Image(
            source=_attr(node, "src"),
            children=tuple(inline_nodes_from_tree(node)),
        )

    logger.debug(f"Unhandled inline token {node_type!r} rendered as text")
    return Text(content=node.content)


def _attr(node: SyntaxTreeNode, name: str) -> str | None:
    value = node.attrs.get(name)
    return str(value) if value is not None else None

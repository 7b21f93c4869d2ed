"""
Link flow construction.

Flattens inline nodes into the items a renderer lays out in a flow: text
runs, labelled links and breaks. Emphasis-like containers are flattened into
their children, images fall back to their alt text and raw HTML is skipped.

Citation status only applies to top-level links: ``citations`` holds indices
into the sibling sequence handed to ``build_link_flow``, so a link nested in
emphasis is never a citation.
"""

from __future__ import annotations

from typing import AbstractSet, Sequence

from .citations.detector import detect_and_strip_citations
from .logging import logger
from .models.flow import FlowItem, FlowLineBreak, FlowLink, FlowSoftBreak, FlowText
from .models.inline import (
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
    render_plain_text,
)


def build_link_flow(
    nodes: Sequence[InlineNode],
    citations: AbstractSet[int] = frozenset(),
) -> list[FlowItem]:
    items: list[FlowItem] = []
    for index, node in enumerate(nodes):
        _add_inline(items, node, is_citation=index in citations)
    return items


def citation_flow(nodes: Sequence[InlineNode]) -> list[FlowItem]:
    """Detect citations and build the flow from the stripped nodes."""
    detection = detect_and_strip_citations(nodes)
    return build_link_flow(detection.processed_nodes, detection.citations)


def _add_inline(items: list[FlowItem], node: InlineNode, *, is_citation: bool = False) -> None:
    if isinstance(node, Text):
        if node.content:
            items.append(FlowText(text=node.content))
    elif isinstance(node, Link):
        items.append(
            FlowLink(
                destination=node.destination,
                text=render_plain_text(node.children),
                is_citation=is_citation,
            )
        )
    elif isinstance(node, SoftBreak):
        items.append(FlowSoftBreak())
    elif isinstance(node, LineBreak):
        items.append(FlowLineBreak())
    elif isinstance(node, Code):
        items.append(FlowText(text=node.content))
    elif isinstance(node, (Emphasis, Strong, Strikethrough)):
        for child in node.children:
            _add_inline(items, child)
    elif isinstance(node, Image):
        # Alt text only
        items.append(FlowText(text=render_plain_text(node.children)))
    elif isinstance(node, Html):
        logger.debug("Skipping inline HTML in link flow")
    else:
        raise TypeError(f"Unsupported inline node: {type(node).__name__}")

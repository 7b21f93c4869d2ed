"""
Citation detection and stripping.

A citation is a link wrapped in literal parentheses inside running text:

    see ([this article](https://example.com)) for details

Parsed into sibling inline nodes that reads as ``text("see (")``,
``link(...)``, ``text(") for details")``. Once a renderer styles the link as a
citation the parentheses are redundant, so they are removed from
the neighbouring text nodes.

The pass runs in two steps over the same index range:

1. Detection reads the ORIGINAL sequence for every candidate link.
2. Stripping runs only after all citations are known.

Interleaving the two would let stripping one citation's neighbour hide the
parenthesis another citation needs, making the result order dependent.

Parentheses are matched as whole characters: a ``)`` carrying a combining mark
(``)`` followed by U+0301) does not close a citation.

A text node shared by two citations (``")("`` between two links) has both
trims computed against its original content and applied as a single slice.
"""

from __future__ import annotations

import unicodedata
from typing import Sequence

from ..logging import logger
from ..models.detection import CitationDetection
from ..models.inline import InlineNode, Link, Text

OPEN_PAREN = "("
CLOSE_PAREN = ")"
ZERO_WIDTH_JOINER = "\u200d"


def detect_and_strip_citations(nodes: Sequence[InlineNode]) -> CitationDetection:
    """Detect citation links among sibling nodes and strip their parentheses.

    Never raises and never mutates ``nodes``. Positions that are not next to
    a citation hold the very same node objects in ``processed_nodes``.
    """
    source = tuple(nodes)
    citations = frozenset(
        index for index, node in enumerate(source) if isinstance(node, Link) and _is_citation(source, index)
    )
    if not citations:
        return CitationDetection(citations=citations, processed_nodes=source)

    drop_last = {index - 1 for index in citations}
    drop_first = {index + 1 for index in citations}

    processed: list[InlineNode] = []
    for index, node in enumerate(source):
        if index not in drop_last and index not in drop_first:
            processed.append(node)
            continue
        # Neighbours of a citation are always text nodes.
        content = node.content
        start = 1 if index in drop_first else 0
        end = len(content) - 1 if index in drop_last else len(content)
        processed.append(node.model_copy(update={"content": content[start:end]}))

    logger.debug(f"Stripped parentheses around {len(citations)} citation(s) in {len(source)} inline node(s)")
    return CitationDetection(citations=citations, processed_nodes=tuple(processed))


def _is_citation(nodes: tuple[InlineNode, ...], index: int) -> bool:
    has_preceding_paren = index > 0 and _ends_with_open_paren(nodes[index - 1])
    has_following_paren = index < len(nodes) - 1 and _starts_with_close_paren(nodes[index + 1])
    return has_preceding_paren and has_following_paren


def _ends_with_open_paren(node: InlineNode) -> bool:
    return isinstance(node, Text) and node.content.endswith(OPEN_PAREN)


def _starts_with_close_paren(node: InlineNode) -> bool:
    if not isinstance(node, Text) or not node.content.startswith(CLOSE_PAREN):
        return False
    # The ")" must be a whole character, not the base of a combined cluster.
    return len(node.content) == 1 or not _extends_cluster(node.content[1])


def _extends_cluster(char: str) -> bool:
    return char == ZERO_WIDTH_JOINER or unicodedata.category(char).startswith("M")

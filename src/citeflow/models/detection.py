"""
Citation detection result model.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_serializer

from .inline import InlineNode


class CitationDetection(BaseModel):
    """
    Outcome of one detection pass over a sibling node sequence.

    - citations: indices into the ORIGINAL sequence of links that are citations
    - processed_nodes: same length as the input, with the bracketing
      parentheses removed from each citation's neighbouring text nodes
    """

    citations: frozenset[int] = Field(default_factory=frozenset)
    processed_nodes: tuple[InlineNode, ...] = ()

    model_config = {
        "frozen": True,
    }

    def is_citation(self, index: int) -> bool:
        return index in self.citations

    @field_serializer("citations")
    def _serialize_citations(self, citations: frozenset[int]) -> list[int]:
        return sorted(citations)

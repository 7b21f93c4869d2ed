"""
Link flow item models.

A link flow is the flat list a renderer lays out inline: runs of text,
links labelled with their plain text, and breaks.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class _FlowItem(BaseModel):
    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


class FlowText(_FlowItem):
    kind: Literal["text"] = "text"
    text: str


class FlowLink(_FlowItem):
    kind: Literal["link"] = "link"
    destination: str | None = None
    text: str
    is_citation: bool = False


class FlowSoftBreak(_FlowItem):
    kind: Literal["soft_break"] = "soft_break"


class FlowLineBreak(_FlowItem):
    kind: Literal["line_break"] = "line_break"


FlowItem = Annotated[
    Union[FlowText, FlowLink, FlowSoftBreak, FlowLineBreak],
    Field(discriminator="kind"),
]

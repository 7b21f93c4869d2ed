"""
Inline node model.

One ``InlineNode`` is one element of parsed, non-block Markdown content.
The model is a closed tagged variant: every node carries a ``kind``
discriminator and pydantic picks the concrete class from it when validating
payloads.

Only ``text`` and ``link`` carry meaning for citation detection. The other
kinds are opaque to it and are passed through untouched.
"""

from __future__ import annotations

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, Field


class _Node(BaseModel):
    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


class Text(_Node):
    kind: Literal["text"] = "text"
    content: str


class Link(_Node):
    kind: Literal["link"] = "link"
    destination: str | None = None
    children: tuple[InlineNode, ...] = ()


class SoftBreak(_Node):
    kind: Literal["soft_break"] = "soft_break"


class LineBreak(_Node):
    kind: Literal["line_break"] = "line_break"


class Code(_Node):
    kind: Literal["code"] = "code"
    content: str


class Html(_Node):
    kind: Literal["html"] = "html"
    content: str


class Emphasis(_Node):
    kind: Literal["emphasis"] = "emphasis"
    children: tuple[InlineNode, ...] = ()


class Strong(_Node):
    kind: Literal["strong"] = "strong"
    children: tuple[InlineNode, ...] = ()


class Strikethrough(_Node):
    kind: Literal["strikethrough"] = "strikethrough"
    children: tuple[InlineNode, ...] = ()


class Image(_Node):
    """Inline image; ``children`` hold the alt text."""

    kind: Literal["image"] = "image"
    source: str | None = None
    children: tuple[InlineNode, ...] = ()


InlineNode = Annotated[
    Union[
        Text,
        Link,
        SoftBreak,
        LineBreak,
        Code,
        Html,
        Emphasis,
        Strong,
        Strikethrough,
        Image,
    ],
    Field(discriminator="kind"),
]

for _container in (Link, Emphasis, Strong, Strikethrough, Image):
    _container.model_rebuild()
del _container


def render_plain_text(nodes: Iterable[InlineNode]) -> str:
    """Concatenate the readable text of a node tree.

    Soft breaks render as a space, line breaks as a newline and raw HTML is
    dropped.
    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, (Text, Code)):
            parts.append(node.content)
        elif isinstance(node, SoftBreak):
            parts.append(" ")
        elif isinstance(node, LineBreak):
            parts.append("\n")
        elif isinstance(node, Html):
            continue
        else:
            parts.append(render_plain_text(node.children))
    return "".join(parts)

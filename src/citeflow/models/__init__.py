from .detection import CitationDetection
from .flow import (
    FlowItem,
    FlowLineBreak,
    FlowLink,
    FlowSoftBreak,
    FlowText,
)
from .inline import (
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

__all__ = [
    "CitationDetection",
    "FlowItem",
    "FlowLineBreak",
    "FlowLink",
    "FlowSoftBreak",
    "FlowText",
    "Code",
    "Emphasis",
    "Html",
    "Image",
    "InlineNode",
    "LineBreak",
    "Link",
    "SoftBreak",
    "Strikethrough",
    "Strong",
    "Text",
    "render_plain_text",
]

import pytest
from pydantic import ValidationError

from citeflow.models import (
    CitationDetection,
    Code,
    Emphasis,
    FlowLink,
    Html,
    Image,
    LineBreak,
    Link,
    SoftBreak,
    Strikethrough,
    Strong,
    Text,
    render_plain_text,
)


def test_nodes_are_frozen():
    node = Text(content="x")
    with pytest.raises(ValidationError):
        node.content = "y"


def test_link_defaults():
    link = Link()
    assert link.destination is None
    assert link.children == ()
    assert link.kind == "link"


def test_nested_payload_validates_into_concrete_classes():
    link = Link.model_validate(
        {
            "destination": "https://a.example",
            "children": [
                {"kind": "strong", "children": [{"kind": "text", "content": "bold"}]},
                {"kind": "code", "content": "x()"},
            ],
        }
    )
    assert isinstance(link.children[0], Strong)
    assert isinstance(link.children[0].children[0], Text)
    assert isinstance(link.children[1], Code)


def test_model_dump_roundtrip_keeps_kind():
    image = Image(source="cat.png", children=(Text(content="a cat"),))
    payload = image.model_dump(mode="json")
    assert payload == {
        "kind": "image",
        "source": "cat.png",
        "children": [{"kind": "text", "content": "a cat"}],
    }
    assert Image.model_validate(payload) == image


def test_render_plain_text_flattens_tree():
    nodes = [
        Text(content="Hello"),
        SoftBreak(),
        Emphasis(children=(Text(content="big"),)),
        Text(content=" "),
        Strikethrough(children=(Strong(children=(Code(content="world"),)),)),
        Html(content="<br>"),
        LineBreak(),
        Link(destination="u", children=(Text(content="end"),)),
    ]
    assert render_plain_text(nodes) == "Hello big world\nend"


def test_citation_detection_defaults():
    detection = CitationDetection()
    assert detection.citations == frozenset()
    assert detection.processed_nodes == ()
    assert not detection.is_citation(0)


def test_flow_link_defaults():
    item = FlowLink(text="x")
    assert item.destination is None
    assert item.is_citation is False

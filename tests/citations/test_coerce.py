import pytest
from pydantic import ValidationError

from citeflow.citations.coerce import coerce_inline_nodes, parse_inline_nodes
from citeflow.models.inline import Emphasis, Link, SoftBreak, Text


def test_parse_inline_nodes_from_dict_payload():
    nodes = parse_inline_nodes(
        [
            {"kind": "text", "content": "see ("},
            {
                "kind": "link",
                "destination": "https://a.example",
                "children": [{"kind": "text", "content": "this"}],
            },
            {"kind": "soft_break"},
        ]
    )
    assert nodes == [
        Text(content="see ("),
        Link(destination="https://a.example", children=(Text(content="this"),)),
        SoftBreak(),
    ]


def test_parse_inline_nodes_accepts_models():
    emphasis = Emphasis(children=(Text(content="x"),))
    nodes = parse_inline_nodes([emphasis, {"kind": "text", "content": "y"}])
    assert nodes[0] == emphasis
    assert nodes[1] == Text(content="y")


def test_parse_inline_nodes_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        parse_inline_nodes([{"kind": "footnote", "content": "x"}])


def test_parse_inline_nodes_rejects_extra_fields():
    with pytest.raises(ValidationError):
        parse_inline_nodes([{"kind": "text", "content": "x", "style": "bold"}])


def test_coerce_none_returns_none():
    assert coerce_inline_nodes(None) is None


def test_coerce_valid_payload():
    out = coerce_inline_nodes([{"kind": "text", "content": "x"}])
    assert out == [Text(content="x")]


def test_coerce_empty_payload_returns_empty_list():
    assert coerce_inline_nodes([]) == []


def test_coerce_invalid_payload_returns_none():
    assert coerce_inline_nodes([{"kind": "link", "children": "nope"}]) is None


def test_coerce_unsupported_type_returns_none():
    assert coerce_inline_nodes("text") is None  # type: ignore[arg-type]
    assert coerce_inline_nodes({"kind": "text", "content": "x"}) is None  # type: ignore[arg-type]
    assert coerce_inline_nodes(42) is None  # type: ignore[arg-type]

from citeflow.flow import build_link_flow, citation_flow
from citeflow.models.flow import FlowLineBreak, FlowLink, FlowSoftBreak, FlowText
from citeflow.models.inline import (
    Code,
    Emphasis,
    Html,
    Image,
    LineBreak,
    Link,
    SoftBreak,
    Strong,
    Text,
)


def test_build_link_flow_maps_each_kind():
    nodes = [
        Text(content="a"),
        SoftBreak(),
        Code(content="b()"),
        LineBreak(),
        Image(source="x.png", children=(Text(content="alt"),)),
        Html(content="<i>"),
        Link(destination="u", children=(Strong(children=(Text(content="label"),)),)),
    ]
    assert build_link_flow(nodes) == [
        FlowText(text="a"),
        FlowSoftBreak(),
        FlowText(text="b()"),
        FlowLineBreak(),
        FlowText(text="alt"),
        FlowLink(destination="u", text="label", is_citation=False),
    ]


def test_empty_text_is_skipped():
    assert build_link_flow([Text(content=""), Text(content="x")]) == [FlowText(text="x")]


def test_citation_flag_uses_top_level_indices():
    nodes = [Text(content="see "), Link(destination="u", children=(Text(content="x"),))]
    items = build_link_flow(nodes, citations={1})
    assert items[1] == FlowLink(destination="u", text="x", is_citation=True)


def test_nested_links_are_never_citations():
    nested = Link(destination="u", children=(Text(content="x"),))
    nodes = [Emphasis(children=(nested,)), Text(content="after")]
    items = build_link_flow(nodes, citations={0})
    assert items == [FlowLink(destination="u", text="x", is_citation=False), FlowText(text="after")]


def test_citation_flow_strips_parentheses_and_flags_links():
    nodes = [
        Text(content="("),
        Link(destination="u1", children=(Text(content="one"),)),
        Text(content=")"),
        Text(content=" and "),
        Link(destination="u2", children=(Text(content="two"),)),
    ]
    assert citation_flow(nodes) == [
        FlowLink(destination="u1", text="one", is_citation=True),
        FlowText(text=" and "),
        FlowLink(destination="u2", text="two", is_citation=False),
    ]

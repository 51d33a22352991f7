"""Tests for decoding raw ADF values into node models."""

import pytest
from pydantic import ValidationError

from atlassian_adf.models.nodes import (
    ADFDocument,
    ADFMark,
    BlockquoteNode,
    BulletListNode,
    CodeBlockNode,
    HardBreakNode,
    HeadingNode,
    ListItemNode,
    OrderedListNode,
    ParagraphNode,
    TextNode,
    UnknownNode,
    is_document_root,
    parse_node,
)


class TestParseNode:
    """Tests for parse_node."""

    # =========================================================================
    # Known variants
    # =========================================================================

    def test_text_node_with_marks(self, adf):
        node = parse_node(adf.text("Bold", "strong", "em"))
        assert isinstance(node, TextNode)
        assert node.text == "Bold"
        assert [mark.type for mark in node.marks] == ["strong", "em"]

    def test_text_node_skips_non_dict_marks(self):
        node = parse_node(
            {"type": "text", "text": "x", "marks": [None, "strong", {"type": "em"}]}
        )
        assert [mark.type for mark in node.marks] == ["em"]

    def test_text_node_ignores_non_list_marks(self):
        node = parse_node({"type": "text", "text": "x", "marks": {"type": "em"}})
        assert node.marks == []

    def test_link_mark_attrs(self, adf):
        node = parse_node(adf.link("here", "https://example.com"))
        assert node.marks == [
            ADFMark(type="link", attrs={"href": "https://example.com"})
        ]

    @pytest.mark.parametrize(
        ("node_type", "model"),
        [
            ("paragraph", ParagraphNode),
            ("orderedList", OrderedListNode),
            ("bulletList", BulletListNode),
            ("listItem", ListItemNode),
            ("blockquote", BlockquoteNode),
            ("codeBlock", CodeBlockNode),
        ],
    )
    def test_container_nodes(self, adf, node_type, model):
        node = parse_node(adf.node(node_type, adf.text("child")))
        assert isinstance(node, model)
        assert node.content == [TextNode(text="child")]

    def test_heading_level(self, adf):
        node = parse_node(adf.heading(3, adf.text("Title")))
        assert isinstance(node, HeadingNode)
        assert node.level == 3

    @pytest.mark.parametrize(
        ("raw_level", "level"),
        [
            (0, 1),
            (2.7, 2),
            (float("nan"), 1),
            (float("inf"), 1),
            (-3, 1),
            (7, 6),
            (1e300, 6),
            (10**30, 6),
            (-(10**30), 1),
        ],
    )
    def test_heading_level_normalized(self, adf, raw_level, level):
        assert parse_node(adf.heading(raw_level)).level == level

    def test_code_block_language(self, code_block_doc):
        node = parse_node(code_block_doc["content"][0])
        assert isinstance(node, CodeBlockNode)
        assert node.language == "javascript"

    def test_code_block_without_attrs(self, adf):
        assert parse_node(adf.node("codeBlock")).language is None

    def test_hard_break(self, adf):
        assert isinstance(parse_node(adf.hard_break()), HardBreakNode)

    def test_document_root(self, adf):
        node = parse_node(adf.document(adf.paragraph()))
        assert isinstance(node, ADFDocument)
        assert node.content == [ParagraphNode()]

    def test_document_root_without_content_list(self):
        node = parse_node({"version": 1, "type": "doc", "content": None})
        assert node == ADFDocument(version=1, content=[])

    # =========================================================================
    # Degraded values
    # =========================================================================

    @pytest.mark.parametrize(
        "value",
        [
            {"type": "paragraph"},
            {"type": "paragraph", "content": "text"},
            {"type": "heading", "content": []},
            {"type": "heading", "attrs": {"level": "2"}, "content": []},
            {"type": "heading", "attrs": {"level": 2}},
            {"type": "text"},
            {"type": "codeBlock", "attrs": {"language": "py"}},
            {"type": "blockquote", "content": {}},
        ],
    )
    def test_malformed_known_nodes_drop_payload(self, value):
        """Known tags with the wrong shape decode to an empty UnknownNode."""
        node = parse_node(value)
        assert node == UnknownNode(type=value["type"])

    def test_unknown_tag_keeps_content_and_text(self, adf):
        node = parse_node(
            {"type": "panel", "text": "raw", "content": [adf.text("inside")]}
        )
        assert node == UnknownNode(
            type="panel", text="raw", content=[TextNode(text="inside")]
        )

    def test_legacy_document_is_unknown(self, adf):
        node = parse_node(adf.legacy_document(adf.paragraph()))
        assert node == UnknownNode(type="doc", content=[ParagraphNode()])

    def test_missing_type_keeps_content(self, adf):
        node = parse_node({"content": [adf.text("x")]})
        assert node == UnknownNode(content=[TextNode(text="x")])

    @pytest.mark.parametrize("value", [None, "text", 42, [], True])
    def test_non_objects(self, value):
        assert parse_node(value) == UnknownNode()


class TestIsDocumentRoot:
    """Tests for is_document_root."""

    def test_version_key_is_enough(self):
        assert is_document_root({"version": 7, "type": "doc"}) is True

    def test_legacy_document(self, adf):
        assert is_document_root(adf.legacy_document()) is False

    def test_other_type(self):
        assert is_document_root({"version": 1, "type": "paragraph"}) is False


class TestModels:
    """Tests for model behaviour outside decoding."""

    def test_models_are_frozen(self):
        node = TextNode(text="x")
        with pytest.raises(ValidationError):
            node.text = "y"

    def test_to_api_dict(self, jira_description):
        document = parse_node(jira_description)
        assert document.to_api_dict() == jira_description

    def test_unknown_to_api_dict(self):
        assert UnknownNode(type="rule").to_api_dict() == {"type": "rule"}
        assert UnknownNode().to_api_dict() == {}

    def test_mark_without_type_to_api_dict(self):
        node = parse_node(
            {"type": "text", "text": "x", "marks": [{"type": 5, "attrs": {"a": 1}}]}
        )
        assert node.marks == [ADFMark(attrs={"a": 1})]
        assert node.to_api_dict() == {
            "type": "text",
            "text": "x",
            "marks": [{"attrs": {"a": 1}}],
        }

    def test_heading_level_is_bounded(self):
        with pytest.raises(ValidationError):
            HeadingNode(level=7)


class TestDeepNesting:
    """Tests for decoding deeply nested trees."""

    def test_deeply_nested_unknown_nodes(self, adf):
        value = adf.text("leaf")
        for _ in range(150):
            value = {"type": "panel", "content": [value]}

        node = parse_node(value)

        for _ in range(150):
            assert isinstance(node, UnknownNode)
            node = node.content[0]
        assert node == TextNode(text="leaf")

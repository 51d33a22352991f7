"""
Atlassian Document Format (ADF) node models.

This module provides Pydantic models for the ADF tree returned by Jira Cloud
and Confluence for fields like ``description`` and page bodies, and the
decoding boundary that turns raw JSON into those models.

Decoding never rejects input. A value whose tag is known but whose shape is
not (a heading without a numeric level, a paragraph whose content is not a
list) becomes an empty :class:`UnknownNode`; a value with an unrecognized tag
becomes an :class:`UnknownNode` that keeps its children and text.
"""

import logging
import math
from typing import Any, ClassVar, Literal, Union

from pydantic import Field

from .base import ADFModel
from .guards import (
    is_adf_node,
    is_bullet_list,
    is_heading,
    is_list_item,
    is_ordered_list,
    is_paragraph,
    is_text_node,
)

logger = logging.getLogger("atlassian-adf.models")

DOCUMENT_VERSION = 1
MAX_HEADING_LEVEL = 6


class ADFMark(ADFModel):
    """
    Model representing a formatting mark on a text node.
    """

    type: str | None = None
    attrs: dict[str, Any] | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ADFMark":
        mark_type = data.get("type")
        attrs = data.get("attrs")
        return cls(
            type=mark_type if isinstance(mark_type, str) else None,
            attrs=attrs if isinstance(attrs, dict) else None,
        )

    def to_api_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.type is not None:
            result["type"] = self.type
        if self.attrs is not None:
            result["attrs"] = self.attrs
        return result


class ADFBaseNode(ADFModel):
    """
    Base class for all node variants.

    ``matches`` is the structural check a raw value must pass before it is
    decoded into the variant.
    """

    node_type: ClassVar[str] = ""

    @classmethod
    def matches(cls, data: dict[str, Any]) -> bool:
        return isinstance(data.get("content"), list)

    def _api_dict_with_content(self, content: list["ADFNode"]) -> dict[str, Any]:
        return {
            "type": self.node_type,
            "content": [child.to_api_dict() for child in content],
        }


class TextNode(ADFBaseNode):
    """
    Model representing a text node and its ordered marks.
    """

    node_type: ClassVar[str] = "text"

    type: Literal["text"] = "text"
    text: str
    marks: list[ADFMark] = Field(default_factory=list)

    @classmethod
    def matches(cls, data: dict[str, Any]) -> bool:
        return is_text_node(data)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "TextNode":
        marks = data.get("marks")
        return cls(
            text=data["text"],
            marks=[
                ADFMark.from_api_response(mark)
                for mark in (marks if isinstance(marks, list) else [])
                if isinstance(mark, dict)
            ],
        )

    def to_api_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": "text", "text": self.text}
        if self.marks:
            result["marks"] = [mark.to_api_dict() for mark in self.marks]
        return result


class ParagraphNode(ADFBaseNode):
    node_type: ClassVar[str] = "paragraph"

    type: Literal["paragraph"] = "paragraph"
    content: list["ADFNode"] = Field(default_factory=list)

    @classmethod
    def matches(cls, data: dict[str, Any]) -> bool:
        return is_paragraph(data)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ParagraphNode":
        return cls(content=parse_content(data["content"]))

    def to_api_dict(self) -> dict[str, Any]:
        return self._api_dict_with_content(self.content)


class HeadingNode(ADFBaseNode):
    """
    Model representing a heading.

    ``level`` is normalized on decode: ``0`` and non-finite levels become 1,
    fractional levels are truncated, and the result is clamped to the ADF
    range of 1 to ``MAX_HEADING_LEVEL``.
    """

    node_type: ClassVar[str] = "heading"

    type: Literal["heading"] = "heading"
    level: int = Field(default=1, ge=1, le=MAX_HEADING_LEVEL)
    content: list["ADFNode"] = Field(default_factory=list)

    @classmethod
    def matches(cls, data: dict[str, Any]) -> bool:
        return is_heading(data) and isinstance(data.get("content"), list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "HeadingNode":
        raw_level = data["attrs"]["level"]
        if not raw_level or (
            isinstance(raw_level, float) and not math.isfinite(raw_level)
        ):
            level = 1
        else:
            level = min(max(int(raw_level), 1), MAX_HEADING_LEVEL)
        return cls(level=level, content=parse_content(data["content"]))

    def to_api_dict(self) -> dict[str, Any]:
        result = self._api_dict_with_content(self.content)
        result["attrs"] = {"level": self.level}
        return result


class OrderedListNode(ADFBaseNode):
    node_type: ClassVar[str] = "orderedList"

    type: Literal["orderedList"] = "orderedList"
    content: list["ADFNode"] = Field(default_factory=list)

    @classmethod
    def matches(cls, data: dict[str, Any]) -> bool:
        return is_ordered_list(data)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "OrderedListNode":
        return cls(content=parse_content(data["content"]))

    def to_api_dict(self) -> dict[str, Any]:
        return self._api_dict_with_content(self.content)


class BulletListNode(ADFBaseNode):
    node_type: ClassVar[str] = "bulletList"

    type: Literal["bulletList"] = "bulletList"
    content: list["ADFNode"] = Field(default_factory=list)

    @classmethod
    def matches(cls, data: dict[str, Any]) -> bool:
        return is_bullet_list(data)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BulletListNode":
        return cls(content=parse_content(data["content"]))

    def to_api_dict(self) -> dict[str, Any]:
        return self._api_dict_with_content(self.content)


class ListItemNode(ADFBaseNode):
    node_type: ClassVar[str] = "listItem"

    type: Literal["listItem"] = "listItem"
    content: list["ADFNode"] = Field(default_factory=list)

    @classmethod
    def matches(cls, data: dict[str, Any]) -> bool:
        return is_list_item(data)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ListItemNode":
        return cls(content=parse_content(data["content"]))

    def to_api_dict(self) -> dict[str, Any]:
        return self._api_dict_with_content(self.content)


class CodeBlockNode(ADFBaseNode):
    """
    Model representing a code block with an optional language tag.
    """

    node_type: ClassVar[str] = "codeBlock"

    type: Literal["codeBlock"] = "codeBlock"
    language: str | None = None
    content: list["ADFNode"] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "CodeBlockNode":
        attrs = data.get("attrs")
        language = attrs.get("language") if isinstance(attrs, dict) else None
        return cls(
            language=language if isinstance(language, str) and language else None,
            content=parse_content(data["content"]),
        )

    def to_api_dict(self) -> dict[str, Any]:
        result = self._api_dict_with_content(self.content)
        if self.language:
            result["attrs"] = {"language": self.language}
        return result


class BlockquoteNode(ADFBaseNode):
    node_type: ClassVar[str] = "blockquote"

    type: Literal["blockquote"] = "blockquote"
    content: list["ADFNode"] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "BlockquoteNode":
        return cls(content=parse_content(data["content"]))

    def to_api_dict(self) -> dict[str, Any]:
        return self._api_dict_with_content(self.content)


class HardBreakNode(ADFBaseNode):
    node_type: ClassVar[str] = "hardBreak"

    type: Literal["hardBreak"] = "hardBreak"

    @classmethod
    def matches(cls, data: dict[str, Any]) -> bool:
        return True

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "HardBreakNode":
        return cls()

    def to_api_dict(self) -> dict[str, Any]:
        return {"type": "hardBreak"}


class UnknownNode(ADFBaseNode):
    """
    Model representing any node this package does not model.

    ``type`` keeps the raw tag (``None`` when the value had none, or was not
    an object at all). ``content`` is ``None`` when the raw value had no
    content list.
    """

    type: str | None = None
    content: list["ADFNode"] | None = None
    text: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "UnknownNode":
        node_type = data.get("type")
        content = data.get("content")
        text = data.get("text")
        return cls(
            type=node_type if isinstance(node_type, str) else None,
            content=parse_content(content) if isinstance(content, list) else None,
            text=text if isinstance(text, str) else None,
        )

    def to_api_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.type is not None:
            result["type"] = self.type
        if self.content is not None:
            result["content"] = [child.to_api_dict() for child in self.content]
        if self.text is not None:
            result["text"] = self.text
        return result


class ADFDocument(ADFModel):
    """
    Model representing an ADF document root.

    ``version`` keeps whatever the raw root carried; the root is recognized by
    the presence of the key, not by its value.
    """

    version: Any = DOCUMENT_VERSION
    type: Literal["doc"] = "doc"
    content: list["ADFNode"] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ADFDocument":
        content = data.get("content")
        if not isinstance(content, list):
            logger.debug("Document root without a content list, decoding as empty")
            content = []
        return cls(version=data.get("version"), content=parse_content(content))

    def to_api_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "type": "doc",
            "content": [node.to_api_dict() for node in self.content],
        }


ADFNode = Union[
    ADFDocument,
    TextNode,
    ParagraphNode,
    HeadingNode,
    OrderedListNode,
    BulletListNode,
    ListItemNode,
    CodeBlockNode,
    BlockquoteNode,
    HardBreakNode,
    UnknownNode,
]

NODE_TYPES: dict[str, type[ADFBaseNode]] = {
    node_class.node_type: node_class
    for node_class in (
        TextNode,
        ParagraphNode,
        HeadingNode,
        OrderedListNode,
        BulletListNode,
        ListItemNode,
        CodeBlockNode,
        BlockquoteNode,
        HardBreakNode,
    )
}


def is_document_root(value: Any) -> bool:
    """
    Check if a raw value should be rendered as a document root.

    Only the presence of ``version`` and the ``doc`` tag are checked; a
    doc-shaped value without ``version`` is a legacy node, not a root.
    """
    return isinstance(value, dict) and "version" in value and value.get("type") == "doc"


def parse_document(data: dict[str, Any]) -> ADFDocument:
    return ADFDocument.from_api_response(data)


def parse_node(value: Any) -> ADFNode:
    """
    Decode a raw JSON value into a node model.

    Args:
        value: Any JSON-decoded value

    Returns:
        The matching node model, an :class:`ADFDocument` for document roots,
        or an :class:`UnknownNode` for anything else
    """
    if not is_adf_node(value):
        if isinstance(value, dict):
            return UnknownNode.from_api_response(value)
        return UnknownNode()

    if is_document_root(value):
        return parse_document(value)

    node_class = NODE_TYPES.get(value["type"])
    if node_class is None:
        return UnknownNode.from_api_response(value)
    if not node_class.matches(value):
        logger.debug(f"Malformed '{value['type']}' node, rendering it as empty")
        return UnknownNode(type=value["type"])
    return node_class.from_api_response(value)


def parse_content(items: list[Any]) -> list[ADFNode]:
    nodes: list[ADFNode] = []
    for item in items:
        nodes.append(parse_node(item))
    return nodes


for _model in (
    ADFDocument,
    ParagraphNode,
    HeadingNode,
    OrderedListNode,
    BulletListNode,
    ListItemNode,
    CodeBlockNode,
    BlockquoteNode,
    UnknownNode,
):
    _model.model_rebuild()

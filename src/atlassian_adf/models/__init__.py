"""
Atlassian Document Format models.

This package provides the Pydantic node models, the raw-JSON guards that gate
decoding, and the shallow document validator.
"""

from .base import ADFModel
from .guards import (
    is_adf_document,
    is_adf_node,
    is_bullet_list,
    is_heading,
    is_list_item,
    is_ordered_list,
    is_paragraph,
    is_text_node,
    validate_document,
)
from .nodes import (
    ADFDocument,
    ADFMark,
    ADFNode,
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
    parse_document,
    parse_node,
)

__all__ = [
    # Base
    "ADFModel",
    # Node models
    "ADFDocument",
    "ADFMark",
    "ADFNode",
    "BlockquoteNode",
    "BulletListNode",
    "CodeBlockNode",
    "HardBreakNode",
    "HeadingNode",
    "ListItemNode",
    "OrderedListNode",
    "ParagraphNode",
    "TextNode",
    "UnknownNode",
    # Decoding
    "is_document_root",
    "parse_document",
    "parse_node",
    # Guards
    "is_adf_document",
    "is_adf_node",
    "is_bullet_list",
    "is_heading",
    "is_list_item",
    "is_ordered_list",
    "is_paragraph",
    "is_text_node",
    "validate_document",
]

"""Base renderer for Atlassian Document Format trees."""

from typing import Any

from ..models.base import ADFModel
from ..models.nodes import (
    ADFDocument,
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
    parse_node,
)


class BaseRenderer:
    """
    Renders a decoded ADF tree to a string.

    The dispatch over node kinds lives here; subclasses change the separators
    and override the hooks for the kinds whose output differs by format.
    """

    document_separator = "\n"
    bullet_prefix = "• "
    hard_break = "\n"

    def render(self, value: Any) -> str:
        """
        Render a raw ADF value or a decoded model.

        Args:
            value: ADF document or node, as raw JSON or as a model

        Returns:
            Rendered string, empty for missing or unrecognized input
        """
        if value is None:
            return ""
        node = value if isinstance(value, ADFModel) else parse_node(value)
        return self.render_node(node)

    def render_node(self, node: ADFNode) -> str:
        match node:
            case ADFDocument(content=content):
                rendered = [self.render_node(child) for child in content]
                return self.document_separator.join(rendered).strip()
            case TextNode():
                return self.render_text(node)
            case ParagraphNode(content=content) | ListItemNode(content=content):
                return self.render_children(content)
            case HeadingNode():
                return self.render_heading(node)
            case OrderedListNode(content=content):
                return "\n".join(
                    f"{index}. {self.render_node(item)}"
                    for index, item in enumerate(content, start=1)
                )
            case BulletListNode(content=content):
                return "\n".join(
                    f"{self.bullet_prefix}{self.render_node(item)}" for item in content
                )
            case CodeBlockNode():
                return self.render_code_block(node)
            case BlockquoteNode(content=content):
                text = "\n".join(self.render_node(child) for child in content)
                return "\n".join(f"> {line}" for line in text.split("\n"))
            case HardBreakNode():
                return self.hard_break
            case UnknownNode(type="doc", content=list() as content):
                # Legacy document without a version key
                return "\n".join(self.render_node(child) for child in content)
            case UnknownNode(content=list() as content):
                return self.render_children(content)
            case _:
                return ""

    def render_children(self, content: list[ADFNode]) -> str:
        parts: list[str] = []
        for child in content:
            parts.append(self.render_node(child))
        return "".join(parts)

    def render_text(self, node: TextNode) -> str:
        return node.text

    def render_heading(self, node: HeadingNode) -> str:
        return self.render_children(node.content)

    def render_code_block(self, node: CodeBlockNode) -> str:
        return self.render_children(node.content)

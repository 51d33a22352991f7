"""Markdown rendering of Atlassian Document Format trees."""

from typing import Any

from ..models.nodes import ADFMark, CodeBlockNode, HeadingNode, TextNode
from .base import BaseRenderer
from .plain_text import PlainTextRenderer


def apply_mark(text: str, mark: ADFMark) -> str:
    """
    Wrap text in the markdown syntax for a single mark.

    Unrecognized marks (underline, textColor, subsup, ...) and links without
    an ``href`` leave the text unchanged.
    """
    match mark.type:
        case "strong":
            return f"**{text}**"
        case "em":
            return f"*{text}*"
        case "code":
            return f"`{text}`"
        case "strike":
            return f"~~{text}~~"
        case "link":
            href = (mark.attrs or {}).get("href")
            return f"[{text}]({href})" if href else text
        case _:
            return text


class MarkdownRenderer(BaseRenderer):
    """Renders ADF to markdown with inline marks and fenced code blocks."""

    document_separator = "\n\n"
    bullet_prefix = "- "
    hard_break = "  \n"

    def __init__(self) -> None:
        self._plain_text = PlainTextRenderer()

    def render_text(self, node: TextNode) -> str:
        # Marks apply in list order, so the last mark ends up outermost
        text = node.text
        for mark in node.marks:
            text = apply_mark(text, mark)
        return text

    def render_heading(self, node: HeadingNode) -> str:
        return f"{'#' * node.level} {self.render_children(node.content)}"

    def render_code_block(self, node: CodeBlockNode) -> str:
        code = self._plain_text.render_children(node.content)
        return f"```{node.language or ''}\n{code}\n```"


_renderer = MarkdownRenderer()


def to_markdown(value: Any) -> str:
    """
    Convert an ADF document or node to markdown.

    Args:
        value: ADF document or node, as raw JSON or as a decoded model

    Returns:
        Markdown text; top-level blocks are separated by blank lines
    """
    return _renderer.render(value)

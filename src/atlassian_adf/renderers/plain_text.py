"""Plain text rendering of Atlassian Document Format trees."""

from typing import Any

from .base import BaseRenderer


class PlainTextRenderer(BaseRenderer):
    """Renders ADF to newline-separated text without inline styling."""


_renderer = PlainTextRenderer()


def to_plain_text(value: Any) -> str:
    """
    Convert an ADF document or node to plain text.

    Args:
        value: ADF document or node, as raw JSON or as a decoded model

    Returns:
        Plain text; blocks are separated by newlines, lists are numbered or
        bulleted and blockquote lines are prefixed with ``> ``
    """
    return _renderer.render(value)

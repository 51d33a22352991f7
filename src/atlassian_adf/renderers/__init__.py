"""
Renderers for Atlassian Document Format trees.
"""

from .base import BaseRenderer
from .markdown import MarkdownRenderer, apply_mark, to_markdown
from .plain_text import PlainTextRenderer, to_plain_text

__all__ = [
    "BaseRenderer",
    "MarkdownRenderer",
    "PlainTextRenderer",
    "apply_mark",
    "to_markdown",
    "to_plain_text",
]

"""
Builders for minimal Atlassian Document Format values.

The builders return plain JSON-ready dictionaries that can be sent as a Jira
or Confluence field body without further conversion.
"""

from typing import Any

from .models.base import ADFModel
from .models.nodes import DOCUMENT_VERSION
from .renderers.plain_text import to_plain_text


def empty_document() -> dict[str, Any]:
    """Create an ADF document with no content."""
    return {"version": DOCUMENT_VERSION, "type": "doc", "content": []}


def paragraph(text: str) -> dict[str, Any]:
    """Create a paragraph node holding a single text node."""
    return {"type": "paragraph", "content": [{"type": "text", "text": text}]}


def heading(text: str, level: int = 1) -> dict[str, Any]:
    """Create a heading node holding a single text node."""
    return {
        "type": "heading",
        "attrs": {"level": level},
        "content": [{"type": "text", "text": text}],
    }


def simple_document(text: Any) -> dict[str, Any]:
    """
    Create an ADF document from plain text.

    Each non-blank line becomes its own paragraph; blank lines are dropped.

    Args:
        text: Plain text; anything that is not a non-empty string yields an
            empty document

    Returns:
        ADF document dictionary
    """
    if not text or not isinstance(text, str):
        return empty_document()

    document = empty_document()
    document["content"] = [
        paragraph(line.strip()) for line in text.split("\n") if line.strip()
    ]
    return document


def is_empty(document: Any) -> bool:
    """
    Check if an ADF document has no meaningful content.

    Args:
        document: ADF document, as a dictionary or a decoded model

    Returns:
        True when the content is missing, not a list, empty, or renders to
        whitespace only
    """
    if not document:
        return True

    if isinstance(document, ADFModel):
        content = getattr(document, "content", None)
    elif isinstance(document, dict):
        content = document.get("content")
    else:
        return True

    if not isinstance(content, list):
        return True
    return len(content) == 0 or to_plain_text(document).strip() == ""

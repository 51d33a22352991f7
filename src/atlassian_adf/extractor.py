"""
Best-effort text extraction from values of unknown shape.

Fields such as a Jira ``description`` may hold a plain string, a current ADF
document, a legacy document without ``version``, or malformed data.
:func:`extract_text` tries a fixed sequence of strategies and always returns
a string.
"""

import logging
from collections.abc import Callable
from typing import Any

from .models.guards import is_adf_node, validate_document
from .renderers.plain_text import to_plain_text

logger = logging.getLogger("atlassian-adf.extractor")

Attempt = Callable[[Any, set[int]], str | None]


def _join_text_nodes(content: list[Any]) -> str:
    return "".join(
        item["text"]
        for item in content
        if isinstance(item, dict)
        and item.get("type") == "text"
        and isinstance(item.get("text"), str)
    )


def _is_content_node(value: Any, node_type: str) -> bool:
    return (
        isinstance(value, dict)
        and value.get("type") == node_type
        and isinstance(value.get("content"), list)
    )


def _extract_plain_string(value: Any, visited: set[int]) -> str | None:
    return value if isinstance(value, str) else None


def _extract_document(value: Any, visited: set[int]) -> str | None:
    return to_plain_text(value) if validate_document(value) else None


def _extract_node(value: Any, visited: set[int]) -> str | None:
    return to_plain_text(value) if is_adf_node(value) else None


def _extract_ordered_list(value: dict[str, Any], visited: set[int]) -> str:
    lines = []
    for index, item in enumerate(value["content"]):
        if _is_content_node(item, "listItem"):
            text = "".join(extract_text(child, visited) for child in item["content"])
            lines.append(f"{index + 1}. {text}")
        else:
            lines.append("")
    return "\n".join(lines)


def _extract_legacy_document(value: Any, visited: set[int]) -> str | None:
    if not _is_content_node(value, "doc"):
        return None

    results = []
    for item in value["content"]:
        if _is_content_node(item, "paragraph"):
            results.append(_join_text_nodes(item["content"]))
        elif _is_content_node(item, "orderedList"):
            results.append(_extract_ordered_list(item, visited))
        else:
            # Other legacy nodes are skipped rather than recursed into
            results.append("")
    return "\n".join(text for text in results if text.strip())


def _extract_paragraph(value: Any, visited: set[int]) -> str | None:
    if not _is_content_node(value, "paragraph"):
        return None
    return _join_text_nodes(value["content"])


ATTEMPTS: tuple[Attempt, ...] = (
    _extract_document,
    _extract_node,
    _extract_legacy_document,
    _extract_paragraph,
)


def extract_text(value: Any, visited: set[int] | None = None) -> str:
    """
    Safely extract plain text from a potentially malformed ADF value.

    Never raises: any error, including hitting the recursion limit on cyclic
    input, is logged as a warning and turned into an empty string.

    Args:
        value: A string, an ADF document or node, or anything else
        visited: Identities of objects already seen during this extraction;
            a fresh set is used when omitted

    Returns:
        The extracted text, or an empty string when nothing could be extracted
    """
    if visited is None:
        visited = set()

    try:
        text = _extract_plain_string(value, visited)
        if text is not None:
            return text

        if isinstance(value, dict | list):
            if id(value) in visited:
                return ""
            visited.add(id(value))

        for attempt in ATTEMPTS:
            text = attempt(value, visited)
            if text is not None:
                return text
        return ""
    except Exception as e:
        logger.warning(f"Error extracting text from ADF object: {e}", exc_info=True)
        return ""

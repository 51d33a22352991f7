"""
Structural guards for raw Atlassian Document Format (ADF) values.

ADF arrives as untrusted JSON from Jira and Confluence responses, so every
guard inspects the shape of the value rather than trusting its ``type`` tag.
None of these functions raise.
"""

from typing import Any


def _is_number(value: Any) -> bool:
    # JSON booleans decode to bool, which is an int subclass
    return isinstance(value, int | float) and not isinstance(value, bool)


def _has_type(value: Any, node_type: str) -> bool:
    return is_adf_node(value) and value["type"] == node_type


def _has_content_list(value: Any, node_type: str) -> bool:
    return _has_type(value, node_type) and isinstance(value.get("content"), list)


def is_adf_document(value: Any) -> bool:
    """Check if a value is an ADF document root.

    Args:
        value: Any JSON-decoded value

    Returns:
        True for ``{"version": 1, "type": "doc", "content": [...]}``
    """
    if not isinstance(value, dict):
        return False
    if not all(key in value for key in ("version", "type", "content")):
        return False
    version = value["version"]
    return (
        _is_number(version)
        and version == 1
        and value["type"] == "doc"
        and isinstance(value["content"], list)
    )


def is_adf_node(value: Any) -> bool:
    """Check if a value is an ADF node, i.e. a dict with a string ``type``."""
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def is_text_node(value: Any) -> bool:
    """Check if a value is a text node carrying a string ``text``."""
    return _has_type(value, "text") and isinstance(value.get("text"), str)


def is_paragraph(value: Any) -> bool:
    return _has_content_list(value, "paragraph")


def is_heading(value: Any) -> bool:
    """Check if a value is a heading with a numeric ``attrs.level``.

    The content list is not part of this check; renderers look at it
    separately.
    """
    if not _has_type(value, "heading"):
        return False
    attrs = value.get("attrs")
    return isinstance(attrs, dict) and _is_number(attrs.get("level"))


def is_ordered_list(value: Any) -> bool:
    return _has_content_list(value, "orderedList")


def is_bullet_list(value: Any) -> bool:
    return _has_content_list(value, "bulletList")


def is_list_item(value: Any) -> bool:
    return _has_content_list(value, "listItem")


def validate_document(value: Any) -> bool:
    """
    Validate a value claiming to be a full ADF document.

    Only the immediate children of ``content`` are checked with
    :func:`is_adf_node`; grandchildren are left to the renderers, which
    degrade malformed nodes instead of rejecting them.

    Args:
        value: Any JSON-decoded value

    Returns:
        True if the document root and its top-level nodes are well-formed
    """
    if not is_adf_document(value):
        return False
    return all(is_adf_node(node) for node in value["content"])

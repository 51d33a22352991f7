"""I/O helpers for reading ADF input."""

import json
from typing import Any

from ..exceptions import ADFDecodeError


def load_adf_json(raw: str) -> Any:
    """Decode JSON text holding an ADF document or node.

    Args:
        raw: JSON text

    Returns:
        The decoded value

    Raises:
        ADFDecodeError: If the text is empty or not valid JSON
    """
    if not raw.strip():
        raise ADFDecodeError("Input is empty")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ADFDecodeError(
            f"Input is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e

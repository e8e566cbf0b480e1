from __future__ import annotations

"""JSON-safety helpers.

These helpers never raise on bad input. Failures are logged and turned into a
sentinel return value.

Policy
------
* beautify_json   -> 4-space indented text, or None on failure
* safe_json_parse -> parsed value, or ``default`` on failure / ``null``

Note that a sentinel result is indistinguishable from input that genuinely
encodes that value (``"null"`` parses to ``default`` as well).
"""

from typing import Any, Optional
import json
import numbers

import numpy as np

from utilbox.core.log import get_logger

logger = get_logger(__name__)

JSON_INDENT = 4


def json_default(obj: Any) -> Any:
    """``json.dumps`` hook for numpy values and sets."""

    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def beautify_json(target: Any) -> Optional[str]:
    """Pretty-print ``target`` as JSON.

    Strings are parsed first and re-serialized; any other value is serialized
    directly. NaN and infinities are rejected.
    """

    try:
        value = json.loads(target) if isinstance(target, str) else target
        return json.dumps(
            value,
            indent=JSON_INDENT,
            ensure_ascii=False,
            allow_nan=False,
            default=json_default,
        )
    except (TypeError, ValueError):
        logger.exception("beautify_json: could not format value of type %s", type(target).__name__)
        return None


def safe_json_parse(value: Any, default: Any = None) -> Any:
    """Parse JSON text, falling back to ``default``.

    ``default`` is returned when parsing fails or the document is ``null``.
    ``None`` input is treated as the ``null`` document. Booleans and numbers
    are read through their JSON text, so ``42`` parses to ``42``; other
    non-text values fail and yield ``default``.
    """

    if value is None:
        return default
    try:
        if isinstance(value, (bool, numbers.Real, np.bool_, np.number)):
            value = json.dumps(value, allow_nan=False, default=json_default)
        parsed = json.loads(value)
    except (TypeError, ValueError):
        logger.exception("safe_json_parse: could not parse value of type %s", type(value).__name__)
        return default
    return default if parsed is None else parsed

from __future__ import annotations

from typing import Any

ELLIPSIS = "…"


def string_limit(text: Any, count: int, fill: str = ELLIPSIS) -> str:
    """Cut ``text`` down to ``count`` characters and append ``fill``.

    Strings within the limit are returned as-is. Anything that is not a string
    yields ``""``.

    >>> string_limit("abcdef", 3)
    'abc…'
    >>> string_limit("abc", 3)
    'abc'
    >>> string_limit(None, 3)
    ''
    """

    if not isinstance(text, str):
        return ""
    if len(text) > count:
        return text[:max(count, 0)] + fill
    return text

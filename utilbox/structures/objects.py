from __future__ import annotations

from typing import Any, Dict, Hashable, Mapping, TypeVar

K = TypeVar("K", bound=Hashable)


def omit(obj: Mapping[K, Any], *keys: K) -> Dict[K, Any]:
    """Return a new dict with ``keys`` removed; ``obj`` is left untouched.

    >>> omit({"a": 1, "b": 2}, "a")
    {'b': 2}
    """

    excluded = set(keys)
    return {k: v for k, v in obj.items() if k not in excluded}

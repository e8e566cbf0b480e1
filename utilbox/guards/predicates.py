from __future__ import annotations

"""Runtime type predicates.

Each predicate answers "is this value of kind X" for values coming from a
dynamic boundary (parsed JSON, user payloads, untyped callers). Internal code
should rely on annotations instead.

Kinds are mutually exclusive:

* booleans are never numbers,
* integers too large for an exact double are "bigint", not "number",
* plain dicts are "object", other mappings are "map",
* weak containers are neither sets nor maps.

>>> is_array([]), is_array({})
(True, False)
>>> is_set(set()), is_map(set())
(True, False)
"""

import enum
import numbers
import weakref
from collections.abc import Mapping
from typing import Any

import numpy as np
from pydantic_core import PydanticUndefined

# Largest integer a float64 represents exactly (Number.MAX_SAFE_INTEGER)
MAX_SAFE_INTEGER = 2**53 - 1

_WEAK_MAPPINGS = (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)


def is_boolean(val: Any) -> bool:
    return isinstance(val, (bool, np.bool_))


def is_undefined(val: Any) -> bool:
    """True for the "no value given" sentinel, distinct from ``None``."""
    return val is PydanticUndefined


def is_string(val: Any) -> bool:
    return isinstance(val, str)


def is_null(val: Any) -> bool:
    return val is None


def _is_integral(val: Any) -> bool:
    return isinstance(val, (int, np.integer)) and not is_boolean(val)


def is_bigint(val: Any) -> bool:
    """True for integers that cannot be stored exactly in a float64."""
    return _is_integral(val) and abs(int(val)) > MAX_SAFE_INTEGER


def is_number(val: Any) -> bool:
    if is_boolean(val):
        return False
    if not isinstance(val, (numbers.Real, np.integer, np.floating)):
        return False
    return not is_bigint(val)


def is_object(val: Any) -> bool:
    """True for plain ``dict`` records (what ``json.loads`` returns for ``{}``)."""
    return type(val) is dict


def is_array(val: Any) -> bool:
    return isinstance(val, (list, tuple))


def is_symbol(val: Any) -> bool:
    """True for enum members, Python's unique named tokens."""
    return isinstance(val, enum.Enum)


def is_set(val: Any) -> bool:
    return isinstance(val, (set, frozenset))


def is_map(val: Any) -> bool:
    """True for mappings other than plain dicts and weak mappings.

    ``OrderedDict``, ``defaultdict``, ``ChainMap`` and ``MappingProxyType``
    all count as maps.
    """
    if type(val) is dict or isinstance(val, _WEAK_MAPPINGS):
        return False
    return isinstance(val, Mapping)


def is_weakset(val: Any) -> bool:
    return isinstance(val, weakref.WeakSet)


def is_weakmap(val: Any) -> bool:
    return isinstance(val, _WEAK_MAPPINGS)


__all__ = [
    "MAX_SAFE_INTEGER",
    "is_boolean",
    "is_undefined",
    "is_string",
    "is_null",
    "is_number",
    "is_object",
    "is_array",
    "is_bigint",
    "is_symbol",
    "is_set",
    "is_map",
    "is_weakset",
    "is_weakmap",
]

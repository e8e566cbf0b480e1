import enum
import weakref
from collections import OrderedDict, defaultdict

import numpy as np
from pydantic_core import PydanticUndefined

from utilbox.guards.predicates import (
    MAX_SAFE_INTEGER,
    is_array,
    is_bigint,
    is_boolean,
    is_map,
    is_null,
    is_number,
    is_object,
    is_set,
    is_string,
    is_symbol,
    is_undefined,
    is_weakmap,
    is_weakset,
)


class Color(enum.Enum):
    RED = 1


class _Ref:
    pass


SAMPLES = {
    "boolean": True,
    "undefined": PydanticUndefined,
    "string": "text",
    "null": None,
    "number": 1.5,
    "object": {"a": 1},
    "array": [1, 2],
    "bigint": MAX_SAFE_INTEGER + 1,
    "symbol": Color.RED,
    "set": {1, 2},
    "map": OrderedDict(a=1),
    "weakset": weakref.WeakSet(),
    "weakmap": weakref.WeakKeyDictionary(),
}

PREDICATES = {
    "boolean": is_boolean,
    "undefined": is_undefined,
    "string": is_string,
    "null": is_null,
    "number": is_number,
    "object": is_object,
    "array": is_array,
    "bigint": is_bigint,
    "symbol": is_symbol,
    "set": is_set,
    "map": is_map,
    "weakset": is_weakset,
    "weakmap": is_weakmap,
}


def test_each_predicate_matches_exactly_its_kind():
    for kind, predicate in PREDICATES.items():
        for sample_kind, value in SAMPLES.items():
            assert predicate(value) == (kind == sample_kind), (kind, sample_kind)


def test_collections_are_told_apart():
    assert is_array([])
    assert not is_array({})
    assert is_set(set())
    assert not is_map(set())


def test_numbers_exclude_booleans_and_big_integers():
    assert is_number(0)
    assert is_number(MAX_SAFE_INTEGER)
    assert is_number(float("nan"))
    assert is_number(np.float32(1.0))
    assert is_number(np.int64(3))
    assert not is_number(False)
    assert not is_number(np.bool_(True))
    assert not is_number(-(MAX_SAFE_INTEGER + 1))
    assert is_bigint(-(MAX_SAFE_INTEGER + 1))
    assert not is_bigint(1.0e300)
    assert not is_bigint(True)


def test_mapping_flavours():
    assert is_object({})
    assert not is_map({})
    assert is_map(defaultdict(list))
    assert not is_object(OrderedDict())
    assert is_weakmap(weakref.WeakValueDictionary())
    assert not is_map(weakref.WeakValueDictionary())


def test_sets_and_sequences():
    assert is_set(frozenset())
    assert not is_set(weakref.WeakSet())
    assert is_array((1, 2))
    assert not is_array("ab")
    assert is_boolean(np.bool_(False))
    assert not is_undefined(None)
    assert not is_symbol(1)
    assert is_weakset(weakref.WeakSet([_Ref()]))

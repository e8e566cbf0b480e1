"""Public utilbox API.

This module is the **stable public surface** of the package:

    from utilbox.api import memory_function, safe_json_parse

The implementations live in the subpackages (guards, structures, text, io,
runtime, units).
"""

from __future__ import annotations

from utilbox.contracts.pixel_configs import PixelConversionParam
from utilbox.core.errors import ArrayIndexError, UtilboxError
from utilbox.guards.predicates import (
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
from utilbox.io.files import file_to_base64
from utilbox.io.json_safety import beautify_json, safe_json_parse
from utilbox.runtime.caches.memory_function import MemoryFunction, memory_function
from utilbox.structures.arrays import array_move, array_set, array_splice
from utilbox.structures.objects import omit
from utilbox.text.pinyin import ZhGroupItem, zh_group, zh_type
from utilbox.text.strings import string_limit
from utilbox.units.pixels import pixel_conversion

__all__ = [
    # type guards
    "is_boolean", "is_undefined", "is_string", "is_null", "is_number",
    "is_object", "is_array", "is_bigint", "is_symbol", "is_set", "is_map",
    "is_weakset", "is_weakmap",

    # copy-on-write containers
    "omit", "array_move", "array_splice", "array_set",

    # text
    "string_limit", "zh_type", "zh_group", "ZhGroupItem",

    # io
    "beautify_json", "safe_json_parse", "file_to_base64",

    # caching
    "memory_function", "MemoryFunction",

    # units
    "pixel_conversion", "PixelConversionParam",

    # errors
    "UtilboxError", "ArrayIndexError",
]

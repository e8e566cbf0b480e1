"""Run the examples embedded in module docstrings."""

import doctest
import importlib

import pytest

from utilbox.structures import arrays, objects
from utilbox.text import pinyin, strings
from utilbox.units import pixels

# the caches package re-exports a function under the module name
memory_function = importlib.import_module("utilbox.runtime.caches.memory_function")

MODULES = [arrays, objects, strings, pinyin, memory_function, pixels]


@pytest.mark.parametrize("module", MODULES, ids=lambda m: m.__name__)
def test_docstring_examples(module):
    result = doctest.testmod(module, optionflags=doctest.ELLIPSIS)
    assert result.attempted > 0
    assert result.failed == 0

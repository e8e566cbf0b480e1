import json
import logging

import numpy as np
import pytest

from utilbox.io.json_safety import beautify_json, json_default, safe_json_parse


@pytest.mark.parametrize(
    "value",
    [{"a": [1, 2, {"b": None}]}, [1, "two", 3.5, True], "text", 42, {"nested": {"x": []}}],
)
def test_safe_json_parse_round_trip(value):
    assert safe_json_parse(json.dumps(value)) == value


def test_safe_json_parse_malformed_returns_default(caplog):
    with caplog.at_level(logging.ERROR, logger="utilbox"):
        assert safe_json_parse("{not json", default={"fallback": True}) == {"fallback": True}
    assert any("safe_json_parse" in r.getMessage() for r in caplog.records)


def test_safe_json_parse_null_and_none_give_default():
    assert safe_json_parse("null", default=[]) == []
    assert safe_json_parse(None, default=0) == 0
    assert safe_json_parse("null") is None


def test_safe_json_parse_reads_scalars_through_their_json_text(caplog):
    with caplog.at_level(logging.ERROR, logger="utilbox"):
        assert safe_json_parse(42, default="d") == 42
        assert safe_json_parse(1.5, default="d") == 1.5
        assert safe_json_parse(True, default="d") is True
        assert safe_json_parse(np.int64(7)) == 7
    assert caplog.records == []


def test_safe_json_parse_non_text_returns_default():
    assert safe_json_parse(object(), default="d") == "d"
    assert safe_json_parse([1, 2], default="d") == "d"
    assert safe_json_parse(float("nan"), default="d") == "d"
    assert safe_json_parse(b'{"a": 1}') == {"a": 1}


def test_beautify_json_indents_with_four_spaces():
    assert beautify_json({"a": 1}) == '{\n    "a": 1\n}'
    assert beautify_json('{"a":[1]}') == '{\n    "a": [\n        1\n    ]\n}'


def test_beautify_json_keeps_unicode_and_numpy():
    assert beautify_json("\"中文\"") == '"中文"'
    assert beautify_json({"x": np.int64(3)}) == '{\n    "x": 3\n}'
    assert beautify_json(np.arange(2)) == "[\n    0,\n    1\n]"


def test_beautify_json_failures_return_none(caplog):
    with caplog.at_level(logging.ERROR, logger="utilbox"):
        assert beautify_json("{broken") is None
        assert beautify_json({"v": object()}) is None
        assert beautify_json(float("nan")) is None
    assert len(caplog.records) == 3


def test_json_default_rejects_unknown_types():
    assert json_default(np.float64(1.5)) == 1.5
    assert sorted(json_default({2, 1})) == [1, 2]
    with pytest.raises(TypeError):
        json_default(object())

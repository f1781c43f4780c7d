"""
Tests for runtime values and environments
"""
import math

import pytest

from meowscript.environment import UNDEFINED, Environment
from meowscript.objects import (
    BREAK,
    ErrorValue,
    MeowMap,
    ReturnValue,
    display,
    format_number,
    is_signal,
    is_truthy,
    kind_of,
    values_equal,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (3.0, "3"),
        (-0.5, "-0.5"),
        (1e21, "1000000000000000000000"),
        (math.nan, "NaN"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_display_nested_values():
    mapping = MeowMap([("a", [1.0, None]), (True, "x")])
    assert display(mapping) == "{a: [1, null], true: x}"


def test_map_keeps_insertion_order_and_kinds():
    mapping = MeowMap()
    mapping[1.0] = "number"
    mapping[True] = "bool"
    mapping["1"] = "string"
    assert mapping.keys() == [1.0, True, "1"]
    assert mapping[1.0] == "number"
    assert mapping[True] == "bool"
    assert len(mapping) == 3


def test_map_rejects_unhashable_keys():
    with pytest.raises(TypeError):
        MeowMap()[[1.0]] = 1


def test_truthiness():
    """
    Test that only false and null are falsy.
    """
    assert not is_truthy(None)
    assert not is_truthy(False)
    assert is_truthy(0.0)
    assert is_truthy("")
    assert is_truthy([])


def test_values_equal_is_kind_strict():
    assert not values_equal(1.0, True)
    assert not values_equal([1.0], [True])
    assert values_equal(MeowMap([("a", [1.0])]), MeowMap([("a", [1.0])]))


def test_kind_of():
    assert kind_of(None) == "null"
    assert kind_of(ErrorValue("x")) == "undefined"


def test_signals():
    assert is_signal(BREAK)
    assert is_signal(ReturnValue(None))
    assert is_signal(ErrorValue("x"))
    assert not is_signal(None)


def test_error_locate_keeps_first_position():
    error = ErrorValue("boom").locate(3, "a.meow").locate(9, "b.meow")
    assert (error.line, error.file) == (3, "a.meow")
    assert ErrorValue("boom").describe() == "boom"


def test_environment_lookup_and_shadowing():
    outer = Environment()
    outer.set("x", 1.0)
    inner = Environment(outer)
    assert inner.get("x") == 1.0
    inner.set("x", 2.0)
    assert inner.get("x") == 2.0
    assert outer.get("x") == 1.0
    assert inner.get("y") is UNDEFINED
    assert "x" in inner and "y" not in inner


def test_environment_reassign_reaches_outward():
    outer = Environment()
    outer.set("x", 1.0)
    inner = Environment(outer)
    assert inner.reassign("x", 5.0)
    assert outer.get("x") == 5.0
    assert not inner.reassign("missing", 1.0)


def test_environment_exports_stop_at_scope():
    root = Environment()
    root.set("hidden", 0.0)
    stop = Environment(root)
    stop.set("a", 1.0)
    stop.set("b", 1.0)
    layer = Environment(stop)
    layer.set("b", 2.0)
    assert layer.exports(stop) == {"a": 1.0, "b": 2.0}

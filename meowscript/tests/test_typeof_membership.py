"""
Tests for typeof and the membership operator in MeowScript
"""
import pytest

from meowscript.objects import ErrorValue
from meowscript.tests.utils import run_source


@pytest.mark.parametrize(
    "source, expected",
    [
        ("typeof 1", "number"),
        ('typeof "a"', "string"),
        ("typeof true", "boolean"),
        ("typeof [1]", "array"),
        ('typeof { "a": 1 }', "object"),
        ("typeof function() {}", "undefined"),
        ("typeof log", "undefined"),
        ("typeof nothing_here", "undefined"),
        ("set f = function() {}; typeof f()", "null"),
        ('furreal "cat"', "string"),
    ],
)
def test_typeof(source, expected):
    assert run_source(source) == expected


def test_typeof_binds_tighter_than_equality():
    assert run_source('typeof 1 == "number"') is True


def test_typeof_lets_return_through():
    source = (
        "set f = function() {\n"
        "    typeof if (true) { return 7; };\n"
        "    0\n"
        "};\n"
        "f()\n"
    )
    assert run_source(source) == 7.0


@pytest.mark.parametrize(
    "source, expected",
    [
        ('"a" ~ { "a": 1 }', True),
        ('"b" ~ { "a": 1 }', False),
        ("2 ~ [1, 2, 3]", True),
        ("[1] ~ [[1], [2]]", True),
        ("4 ~ [1, 2, 3]", False),
        ("123 ~ 2", True),
        ("123 ~ 4", False),
        ('"a" in { "a": 1 }', True),
    ],
)
def test_membership(source, expected):
    assert run_source(source) is expected


def test_membership_with_unusable_key_is_false():
    assert run_source('[1] ~ { "a": 1 }') is False


def test_membership_unsupported():
    assert run_source('true ~ "a"') == ErrorValue("unknown operator: true ~ a")


def test_membership_between_strings_is_unknown_operator():
    assert run_source('"meow" ~ "e"') == ErrorValue("unknown operator: meow ~ e")

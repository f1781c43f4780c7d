"""
Tests for function literals and calls in MeowScript
"""
from meowscript.objects import ErrorValue, FunctionValue
from meowscript.tests.utils import run_source


def test_call_returns_last_value():
    assert run_source("set add = function(a, b) { a + b }; add(1, 2)") == 3.0


def test_explicit_return():
    source = (
        "set pick = function(flag) {\n"
        "    if (flag) { return \"yes\"; }\n"
        "    \"no\"\n"
        "};\n"
        "[pick(true), pick(false)]\n"
    )
    assert run_source(source) == ["yes", "no"]


def test_bare_return_yields_null():
    assert run_source("set f = function() { return; 5 }; f()") is None


def test_empty_body_yields_null():
    assert run_source("set f = function() {}; f()") is None


def test_binding_as_last_statement_yields_null():
    assert run_source("set f = function() { set x = 1; }; f()") is None


def test_arity_too_few():
    """
    Test that a missing argument reports both counts.
    """
    result = run_source("set f = function(a, b) { a }; f(1)")
    assert result == ErrorValue("Wrong number of arguments: expected 2, given 1")


def test_arity_too_many():
    result = run_source("set f = function(a, b) { a }; f(1, 2, 3)")
    assert result == ErrorValue("Wrong number of arguments: expected 2, given 3")


def test_recursion():
    source = (
        "set fact = function(n) {\n"
        "    if (n <= 1) { return 1; }\n"
        "    n * fact(n - 1)\n"
        "};\n"
        "fact(5)\n"
    )
    assert run_source(source) == 120.0


def test_higher_order_functions():
    source = (
        "set twice = function(f, x) { f(f(x)) };\n"
        "twice(function(n) { n + 3 }, 1)\n"
    )
    assert run_source(source) == 7.0


def test_immediately_invoked_function():
    assert run_source("function(x) { x * x }(4)") == 16.0


def test_function_value_is_returned():
    result = run_source("function(a) { a }")
    assert isinstance(result, FunctionValue)
    assert result.params == ['a']


def test_calling_a_non_function():
    assert run_source("set x = 5; x()") == ErrorValue("not a function: 5")


def test_cat_spelled_function():
    source = "scratch purr = pawction(a) { tail a + 1; }; purr(1)"
    assert run_source(source) == 2.0


def test_error_carries_line():
    result = run_source("set f = function(a) { a };\n\nf()")
    assert result.line == 3
    assert result.describe() == (
        "Wrong number of arguments: expected 1, given 0 on line 3 in <test>"
    )

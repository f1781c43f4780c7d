"""
Tests for scoping rules and closures in MeowScript
"""
from meowscript.interpreter import Interpreter
from meowscript.objects import ErrorValue
from meowscript.tests.utils import run_source


def test_set_in_block_does_not_leak():
    """
    Test that 'set' inside a nested block shadows rather than overwrites.
    """
    source = (
        "set x = 1;\n"
        "if (true) { set x = 2; }\n"
        "x\n"
    )
    assert run_source(source) == 1.0


def test_anew_in_block_updates_enclosing_binding():
    source = (
        "set x = 1;\n"
        "if (true) { anew x = 2; }\n"
        "x\n"
    )
    assert run_source(source) == 2.0


def test_anew_requires_existing_binding():
    assert run_source("anew y = 1;") == ErrorValue("identifier not found: y")


def test_closure_mutation_is_shared():
    """
    Test that closures over the same scope see each other's reassignments.
    """
    source = (
        "set make = function() {\n"
        "    set n = 0;\n"
        "    set inc = function() { anew n = n + 1; n };\n"
        "    set read = function() { n };\n"
        "    [inc, read]\n"
        "};\n"
        "set pair = make();\n"
        "set inc = pair[0];\n"
        "set read = pair[1];\n"
        "inc(); inc(); inc();\n"
        "read()\n"
    )
    assert run_source(source) == 3.0


def test_closures_from_separate_calls_are_independent():
    source = (
        "set counter = function() {\n"
        "    set n = 0;\n"
        "    function() { anew n = n + 1; n }\n"
        "};\n"
        "set a = counter();\n"
        "set b = counter();\n"
        "a(); a();\n"
        "[a(), b()]\n"
    )
    assert run_source(source) == [3.0, 1.0]


def test_closure_captures_definition_scope():
    """
    Test that a function sees the scope of its literal, not of its caller.
    """
    source = (
        "set x = \"outer\";\n"
        "set show = function() { x };\n"
        "set call = function() { set x = \"inner\"; show() };\n"
        "call()\n"
    )
    assert run_source(source) == "outer"


def test_function_locals_do_not_leak():
    source = (
        "set f = function() { set secret = 1; secret };\n"
        "f();\n"
        "secret\n"
    )
    assert run_source(source) == ErrorValue("identifier not found: secret")


def test_parameters_shadow_globals():
    source = (
        "set x = 10;\n"
        "set f = function(x) { x * 2 };\n"
        "[f(1), x]\n"
    )
    assert run_source(source) == [2.0, 10.0]


def test_user_bindings_shadow_builtins(capsys):
    """
    Test that a program may rebind a builtin name.
    """
    source = (
        "set log = function(x) { x + 1 };\n"
        "log(1)\n"
    )
    assert run_source(source) == 2.0
    assert capsys.readouterr().out == ""


def test_loop_iterations_get_fresh_scope():
    source = (
        "set i = 0;\n"
        "loop {\n"
        "    anew i = i + 1;\n"
        "    set tmp = i;\n"
        "    if (i == 3) { break; }\n"
        "};\n"
        "typeof tmp\n"
    )
    assert run_source(source) == "undefined"


def test_interpreter_keeps_bindings_between_programs():
    interpreter = Interpreter("<test>")
    run_source("set total = 1;", interpreter)
    run_source("anew total = total + 1;", interpreter)
    assert run_source("total", interpreter) == 2.0

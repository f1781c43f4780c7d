"""Argument checks shared by the native libraries.

Natives never raise for bad input: they return an :class:`ErrorValue`,
which the interpreter propagates like any other runtime error.


File: common.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from meowscript.objects import ErrorValue, NativeFunction, display, is_number


def check_arity(args: list, expected: int) -> ErrorValue | None:
    if len(args) != expected:
        return ErrorValue(
            f"Wrong number of arguments. Got {len(args)}. Expected {expected}."
        )
    return None


def check_min_arity(args: list, minimum: int) -> ErrorValue | None:
    if len(args) < minimum:
        return ErrorValue(
            f"Wrong number of arguments. Got {len(args)}. Expected at least {minimum}."
        )
    return None


def expect_array(value, position: str = 'First') -> ErrorValue | None:
    if not isinstance(value, list):
        return ErrorValue(f"{position} argument must be an array. Got {display(value)}")
    return None


def expect_string(value, position: str = 'First') -> ErrorValue | None:
    if not isinstance(value, str):
        return ErrorValue(f"{position} argument must be a string. Got {display(value)}")
    return None


def expect_number(value, position: str = 'First') -> ErrorValue | None:
    if not is_number(value):
        return ErrorValue(f"{position} argument must be a number. Got {display(value)}")
    return None


def natives(**funcs) -> dict:
    """
    Wrap plain Python callables as named native functions.

    Non-callables (library constants) are passed through unchanged.
    """
    return {
        name: NativeFunction(name, func) if callable(func) else func
        for name, func in funcs.items()
    }

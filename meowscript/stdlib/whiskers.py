"""nya:whiskers - string helpers.


File: whiskers.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from meowscript.objects import display
from meowscript.stdlib.common import check_arity, expect_array, expect_string, natives


def replace(args: list):
    """Replace every occurrence of the second argument's display."""
    error = check_arity(args, 3) or expect_string(args[0])
    if error is not None:
        return error
    return args[0].replace(display(args[1]), display(args[2]))


def in_whiskers(args: list):
    """Stringify a value; arrays concatenate their elements."""
    error = check_arity(args, 1)
    if error is not None:
        return error
    value = args[0]
    if isinstance(value, list):
        return ''.join(display(item) for item in value)
    return display(value)


def split(args: list):
    error = check_arity(args, 2) or expect_string(args[0]) or expect_string(args[1], 'Second')
    if error is not None:
        return error
    if args[1] == '':
        return list(args[0])
    return args[0].split(args[1])


def join(args: list):
    error = check_arity(args, 2) or expect_array(args[0]) or expect_string(args[1], 'Second')
    if error is not None:
        return error
    return args[1].join(display(item) for item in args[0])


def exports() -> dict:
    return natives(replace=replace, in_whiskers=in_whiskers, split=split, join=join)

"""nya:furrball - array helpers.

The natives never mutate their input; each returns a new array. ``map`` is
written in MeowScript on top of them: the inner ``iter`` closure appends to
the captured ``res`` accumulator with ``anew``, which is why reassignment
has to reach through the scope chain.


File: furrball.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from meowscript.objects import values_equal
from meowscript.stdlib.common import check_arity, expect_array, natives


SOURCE = """
include "nya:clawtility";

set map = function(arr, f) {
    set res = [];
    set iter = function(array) {
        if (length(array) == 0) {
            return;
        }
        anew res = push(res, f(array[0]));
        iter(bottom(array));
    };
    iter(arr);
    return res;
};
"""


def push(args: list):
    error = check_arity(args, 2) or expect_array(args[0])
    if error is not None:
        return error
    return args[0] + [args[1]]


def pounce(args: list):
    """Return the array without its last element."""
    error = check_arity(args, 1) or expect_array(args[0])
    if error is not None:
        return error
    return args[0][:-1]


def top(args: list):
    """Return the first element, or null for an empty array."""
    error = check_arity(args, 1) or expect_array(args[0])
    if error is not None:
        return error
    return args[0][0] if args[0] else None


def bottom(args: list):
    """Return every element but the first."""
    error = check_arity(args, 1) or expect_array(args[0])
    if error is not None:
        return error
    return args[0][1:]


def includes(args: list):
    error = check_arity(args, 2) or expect_array(args[0])
    if error is not None:
        return error
    return any(values_equal(item, args[1]) for item in args[0])


def exports() -> dict:
    return natives(push=push, pounce=pounce, top=top, bottom=bottom, includes=includes)

"""nya:yarnball - random numbers and sampling.


File: yarnball.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import random as _random

from meowscript.objects import ErrorValue
from meowscript.stdlib.common import check_arity, expect_array, expect_number, natives


def random(args: list):
    error = check_arity(args, 0)
    if error is not None:
        return error
    return _random.random()


def uniform(args: list):
    error = check_arity(args, 2) or expect_number(args[0]) or expect_number(args[1], 'Second')
    if error is not None:
        return error
    return _random.uniform(args[0], args[1])


def randint(args: list):
    """Integer in ``[a, b]`` inclusive, returned as a Number."""
    error = check_arity(args, 2) or expect_number(args[0]) or expect_number(args[1], 'Second')
    if error is not None:
        return error
    if not (math.isfinite(args[0]) and math.isfinite(args[1])):
        return ErrorValue("randint bounds must be finite")
    low, high = math.ceil(args[0]), math.floor(args[1])
    if low > high:
        return ErrorValue(f"Empty range for randint: {low} to {high}")
    return float(_random.randint(low, high))


def choice(args: list):
    error = check_arity(args, 1) or expect_array(args[0])
    if error is not None:
        return error
    if not args[0]:
        return ErrorValue("Cannot choose from an empty array")
    return _random.choice(args[0])


def shuffle(args: list):
    """Return a shuffled copy; the argument is left untouched."""
    error = check_arity(args, 1) or expect_array(args[0])
    if error is not None:
        return error
    items = list(args[0])
    _random.shuffle(items)
    return items


def exports() -> dict:
    return natives(random=random, uniform=uniform, randint=randint, choice=choice, shuffle=shuffle)

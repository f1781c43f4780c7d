"""nya:catculator - maths.


File: catculator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import random
import sys

from meowscript.stdlib.common import check_arity, expect_number, natives


def _unary(func):
    """Build a one-argument numeric native from a float function."""
    def native(args: list):
        error = check_arity(args, 1) or expect_number(args[0])
        if error is not None:
            return error
        try:
            return float(func(args[0]))
        except (ValueError, OverflowError):
            return math.nan
    return native


def _binary_args(args: list):
    return (
        check_arity(args, 2)
        or expect_number(args[0])
        or expect_number(args[1], 'Second')
    )


def random_between(args: list):
    """Uniform float in ``[min, max)``."""
    error = _binary_args(args)
    if error is not None:
        return error
    low, high = args
    return low + (high - low) * random.random()


def power(args: list):
    error = _binary_args(args)
    if error is not None:
        return error
    try:
        return math.pow(args[0], args[1])
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def modulo(args: list):
    """Remainder that is never negative for a positive divisor."""
    error = _binary_args(args)
    if error is not None:
        return error
    a, b = args
    if b == 0:
        return math.nan
    try:
        return math.fmod(math.fmod(a, b) + b, b)
    except ValueError:
        return math.nan


def _finite_only(func):
    return lambda value: func(value) if math.isfinite(value) else value


def _round_half_away(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def exports() -> dict:
    return natives(
        random=random_between,
        round=_unary(_round_half_away),
        ceil=_unary(_finite_only(math.ceil)),
        floor=_unary(_finite_only(math.floor)),
        abs=_unary(abs),
        sqrt=_unary(math.sqrt),
        sin=_unary(math.sin),
        cos=_unary(math.cos),
        tan=_unary(math.tan),
        pow=power,
        log2=_unary(math.log2),
        log10=_unary(math.log10),
        # Identifiers cannot contain digits; these are the callable spellings.
        log_two=_unary(math.log2),
        log_ten=_unary(math.log10),
        modulo=modulo,
        PI=math.pi,
        E=math.e,
        MAX_INT=sys.float_info.max,
        MIN_INT=-sys.float_info.max,
    )

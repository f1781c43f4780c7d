"""nya:clawtility - general utilities.

``length``, ``kibble`` (read a line of input) and ``nap`` (sleep).


File: clawtility.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import time

from meowscript.objects import ErrorValue, display
from meowscript.stdlib.common import check_arity, expect_number, natives


def length(args: list):
    error = check_arity(args, 1)
    if error is not None:
        return error
    value = args[0]
    if isinstance(value, (str, list)):
        return float(len(value))
    return ErrorValue(f"Argument must be a string or array. Got {display(value)}")


def kibble(args: list):
    """Print the optional prompt and return one line of input."""
    if len(args) > 1:
        return check_arity(args, 1)
    prompt = display(args[0]) if args else ''
    try:
        return input(prompt)
    except EOFError:
        return None


def nap(args: list):
    """Sleep for the given number of milliseconds."""
    error = check_arity(args, 1) or expect_number(args[0])
    if error is not None:
        return error
    if not math.isfinite(args[0]):
        return ErrorValue(f"nap duration must be finite, got {display(args[0])}")
    time.sleep(max(args[0], 0.0) / 1000)
    return None


def exports() -> dict:
    return natives(length=length, kibble=kibble, nap=nap)

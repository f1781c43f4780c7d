"""nya:scratchpad - file system access.

Paths are taken as given, relative to the process working directory.
Failures come back as runtime errors carrying the OS message.


File: scratchpad.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os

from meowscript.objects import ErrorValue, display
from meowscript.stdlib.common import check_arity, expect_string, natives


def read_file(args: list):
    error = check_arity(args, 1) or expect_string(args[0])
    if error is not None:
        return error
    try:
        with open(args[0], 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        return ErrorValue(f"Couldn't open {args[0]}: {e.strerror}")


def write_file(args: list):
    """Write the display of the second argument, replacing the file."""
    error = check_arity(args, 2) or expect_string(args[0])
    if error is not None:
        return error
    try:
        with open(args[0], 'w', encoding='utf-8') as f:
            f.write(display(args[1]))
    except OSError as e:
        return ErrorValue(f"Couldn't write to {args[0]}: {e.strerror}")
    return None


def exists(args: list):
    error = check_arity(args, 1) or expect_string(args[0])
    if error is not None:
        return error
    return os.path.exists(args[0])


def exports() -> dict:
    return natives(readFile=read_file, writeFile=write_file, exists=exists)

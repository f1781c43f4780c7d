"""Standard library registry for MeowScript.

Each built-in library is a table of native functions (and constants), plus
an optional MeowScript source fragment that is evaluated on top of the
natives when the library is included. Libraries are addressed by their cat
name (``nya:furrball``) or their plain alias (``nya:array``); ``std:`` is
accepted in place of ``nya:``.

The prelude (``log`` and ``meow``) is visible to every program without an
include.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import NamedTuple

from meowscript.objects import NativeFunction, display
from meowscript.stdlib import catculator, clawtility, furrball, scratchpad, whiskers, yarnball
from meowscript.stdlib.common import check_min_arity


LIB_PREFIXES = ('nya:', 'std:')


class Library(NamedTuple):
    """A built-in library: native bindings plus optional MeowScript source."""
    name: str
    natives: dict
    source: str | None = None


def _library(name, module) -> Library:
    return Library(name, module.exports(), getattr(module, 'SOURCE', None))


_LIBRARIES = {
    'clawtility': (clawtility, 'util'),
    'furrball': (furrball, 'array'),
    'whiskers': (whiskers, 'string'),
    'scratchpad': (scratchpad, 'fs'),
    'catculator': (catculator, 'math'),
    'yarnball': (yarnball, 'random'),
}

_ALIASES = {alias: name for name, (_, alias) in _LIBRARIES.items()}


def is_builtin_name(name: str) -> bool:
    """Return ``True`` if ``name`` carries a built-in library prefix."""
    return name.startswith(LIB_PREFIXES)


def get_library(name: str) -> Library | None:
    """
    Look up a built-in library by its prefixed name.

    Parameters:
        name (str): e.g. ``nya:furrball``, ``std:array``.

    Returns:
        Library | None: A fresh library instance, or ``None`` if unknown.
    """
    if not is_builtin_name(name):
        return None
    bare = name.split(':', 1)[1]
    bare = _ALIASES.get(bare, bare)
    entry = _LIBRARIES.get(bare)
    if entry is None:
        return None
    return _library(f"nya:{bare}", entry[0])


def library_names() -> list[str]:
    return [f"nya:{name}" for name in _LIBRARIES]


def _log(args: list):
    error = check_min_arity(args, 1)
    if error is not None:
        return error
    print(' '.join(display(arg) for arg in args))
    return None


def _meow(args: list):
    error = check_min_arity(args, 1)
    if error is not None:
        return error
    print('Meow!', ' '.join(display(arg) for arg in args))
    return None


def prelude() -> dict:
    """
    Return the bindings every program sees without an include.
    """
    return {
        'log': NativeFunction('log', _log),
        'meow': NativeFunction('meow', _meow),
    }


__all__ = ["Library", "LIB_PREFIXES", "get_library", "is_builtin_name", "library_names", "prelude"]

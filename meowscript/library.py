"""Library loading for MeowScript.

``include "nya:<name>"`` (or ``std:<name>``) loads a built-in library from
`meowscript.stdlib`; any other name loads ``<base_dir>/<name>.meow``. Either
way the library body runs in a separate interpreter whose scope sits under
the builtin prelude, and every binding it leaves behind is exported.


File: library.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
from typing import TYPE_CHECKING

from meowscript.exceptions import LibraryNotFoundException
from meowscript.lexer import Lexer
from meowscript.objects import ErrorValue, is_error
from meowscript.parser import Parser
from meowscript.stdlib import get_library, is_builtin_name

if TYPE_CHECKING:
    from meowscript.interpreter import Interpreter


SOURCE_SUFFIX = '.meow'


def resolve_path(name: str, base_dir: str) -> str:
    """
    Return the absolute path a file library name refers to.
    """
    return os.path.normpath(os.path.abspath(os.path.join(base_dir, name + SOURCE_SUFFIX)))


def _load_failure(name: str, errors: list[str]) -> ErrorValue:
    lines = [f"Could not load lib: {name}"]
    lines.extend(f"\t{e}" for e in errors)
    return ErrorValue("\n".join(lines))


def _run_library(includer: 'Interpreter', key: str, name: str, source: str, natives=None):
    """
    Parse and evaluate library source, returning its bindings or an error.
    """
    from meowscript.interpreter import Interpreter

    if key in includer.loaded_libraries:
        return ErrorValue(f"Recursive include of '{key}'")

    parser = Parser(Lexer(source), key)
    program = parser.parse_program()
    if parser.errors:
        return _load_failure(name, parser.errors)

    includer.loaded_libraries.add(key)
    try:
        library_interpreter = Interpreter(key, includer.base_dir, includer.loaded_libraries)
        if natives:
            library_interpreter.globals.update(natives)
        result = library_interpreter.evaluate(program)
        if is_error(result):
            return result
        return library_interpreter.env.exports(library_interpreter.globals)
    finally:
        includer.loaded_libraries.discard(key)


def load_library(includer: 'Interpreter', name: str):
    """
    Load a library for an ``include`` statement.

    Args:
        includer (Interpreter): The interpreter evaluating the include.
        name (str): The library name as written in the source.

    Returns:
        dict | ErrorValue: The exported bindings, or the error that stopped
        the load.

    Raises:
        LibraryNotFoundException: If a file library does not exist.
    """
    if is_builtin_name(name):
        library = get_library(name)
        if library is None:
            return ErrorValue(f"Could not load lib: {name}")
        if library.source is None:
            return dict(library.natives)
        return _run_library(includer, library.name, name, library.source, library.natives)

    path = resolve_path(name, includer.base_dir)
    if path in includer.loaded_libraries:
        return ErrorValue(f"Recursive include of '{path}'")
    if not os.path.isfile(path):
        raise LibraryNotFoundException(name, path)
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    return _run_library(includer, path, name, source)

"""MeowScript.

A small dynamically-typed scripting language: an on-demand lexer, a
precedence-climbing parser producing tuple ASTs, and a tree-walking
interpreter with closures and library inclusion.

    >>> from meowscript import interpret
    >>> interpret('set add = function(a, b) { a + b }; add(1, 2)')
    3.0


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from meowscript.exceptions import (
    LibraryNotFoundException,
    MalformedNumberException,
    MeowSyntaxError,
)
from meowscript.interpreter import Interpreter
from meowscript.lexer import Lexer, Token, tokenize
from meowscript.parser import Parser

__version__ = "0.1.0"


def parse(source: str, file: str = '<stdin>') -> list:
    """
    Parse source text into a program.

    Raises:
        MeowSyntaxError: If the parser reported any errors.
    """
    parser = Parser(Lexer(source), file)
    program = parser.parse_program()
    if parser.errors:
        raise MeowSyntaxError(parser.errors, file)
    return program


def interpret(source: str, file: str = '<stdin>', base_dir: str | None = None,
              interpreter: Interpreter | None = None):
    """
    Lex, parse and evaluate source text.

    Parameters:
        source (str): The MeowScript program.
        file (str): Name used in diagnostics.
        base_dir (str): Directory file libraries are resolved against.
        interpreter (Interpreter): Reuse an interpreter and its bindings.

    Returns:
        The program's value, or the `ErrorValue` that stopped it.

    Raises:
        MeowSyntaxError: If the parser reported any errors.
    """
    program = parse(source, file)
    if interpreter is None:
        interpreter = Interpreter(file, base_dir)
    return interpreter.evaluate(program)


__all__ = [
    "Interpreter",
    "Lexer",
    "LibraryNotFoundException",
    "MalformedNumberException",
    "MeowSyntaxError",
    "Parser",
    "Token",
    "interpret",
    "parse",
    "tokenize",
]

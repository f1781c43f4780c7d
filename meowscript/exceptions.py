"""Errors.

Host-level exceptions. Language-level failures (undefined identifiers, type
mismatches, bad arity ...) are not exceptions: they travel through the
interpreter as :class:`meowscript.objects.ErrorValue` signals. The exceptions
below abort the current run instead.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class MalformedNumberException(Exception):
    """
    Error for numerals the lexer cannot convert, such as ``1.2.3``.
    """
    def __init__(self, literal, line=None):
        self.literal = literal
        self.line = line
        message = f"Malformed number '{literal}'"
        if line is not None:
            message += f" on line {line}"
        super().__init__(message)


class LibraryNotFoundException(Exception):
    """
    Error for a file library that does not exist on disk.
    """
    def __init__(self, name, path=None):
        self.name = name
        self.path = path
        message = f"Lib not found: '{name}'"
        if path is not None:
            message += f" (looked for {path})"
        super().__init__(message)


class MeowSyntaxError(Exception):
    """
    Raised by :func:`meowscript.interpret` when the parser reported errors.
    """
    def __init__(self, errors, file=None):
        self.errors = list(errors)
        message = "\n".join(f"\t{e}" for e in self.errors)
        if file is not None:
            message = f"in {file}\n{message}"
        super().__init__(message)

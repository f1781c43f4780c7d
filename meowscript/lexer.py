"""Lexer for MeowScript.

The lexer scans the source on demand: every call to :meth:`Lexer.next_token`
matches a combined regular expression of named groups at the current cursor
and yields a single :class:`Token` containing its type, value and source line
number. Once the input is exhausted it keeps returning ``EOF``.

Tokens cover literals (numbers, strings, booleans), keywords (``scratch``,
``pawction``, ``furrever`` … and their plain English spellings), operators and
delimiters. Whitespace is skipped silently; ``//`` line comments are returned
as ``COMMENT`` tokens which the parser ignores. Characters that start no token
are returned as ``ILLEGAL`` rather than raising, so the parser can report
them alongside its other errors.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re

from meowscript.exceptions import MalformedNumberException


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): The source line the token starts on.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
        )

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"


# Keywords shadow identifiers of the same spelling everywhere.
KEYWORDS: dict[str, tuple[str, object]] = {
    # Cat spellings
    'scratch':    ('SET', 'scratch'),
    'amew':       ('ANEW', 'amew'),
    'pawction':   ('FUNC', 'pawction'),
    'purrhaps':   ('IF', 'purrhaps'),
    'meowtually': ('ELSE', 'meowtually'),
    'tail':       ('RETURN', 'tail'),
    'pawckage':   ('INCLUDE', 'pawckage'),
    'furreal':    ('TYPEOF', 'furreal'),
    'furrever':   ('LOOP', 'furrever'),
    'hiss':       ('BREAK', 'hiss'),
    'continue':   ('CONTINUE', 'continue'),
    'purrfect':   ('BOOLEAN', True),
    'clawful':    ('BOOLEAN', False),

    # Plain spellings
    'set':        ('SET', 'set'),
    'anew':       ('ANEW', 'anew'),
    'function':   ('FUNC', 'function'),
    'if':         ('IF', 'if'),
    'else':       ('ELSE', 'else'),
    'return':     ('RETURN', 'return'),
    'include':    ('INCLUDE', 'include'),
    'typeof':     ('TYPEOF', 'typeof'),
    'loop':       ('LOOP', 'loop'),
    'break':      ('BREAK', 'break'),
    'true':       ('BOOLEAN', True),
    'false':      ('BOOLEAN', False),
    'in':         ('IN', 'in'),
}


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Comments
    ('COMMENT',   r'//[^\n]*'),

    # Literals
    ('NUMBER',    r'[0-9][0-9.]*'),
    ('STRING',    r'"[^"]*"?'),

    # Identifiers and keywords
    ('IDENT',     r'[A-Za-z_]+'),

    # Two-character operators
    ('EQ',        r'=='),
    ('NE',        r'!='),
    ('LE',        r'<='),
    ('GE',        r'>='),
    ('LSHIFT',    r'<<'),
    ('RSHIFT',    r'>>'),

    # Single-character operators
    ('ASSIGN',    r'='),
    ('BANG',      r'!'),
    ('LT',        r'<'),
    ('GT',        r'>'),
    ('PLUS',      r'\+'),
    ('MINUS',     r'\-'),
    ('ASTERISK',  r'\*'),
    ('SLASH',     r'/'),
    ('PERCENT',   r'%'),
    ('IN',        r'\~'),
    ('AMP',       r'\&'),
    ('PIPE',      r'\|'),
    ('CARET',     r'\^'),

    # Delimiters
    ('COMMA',     r','),
    ('COLON',     r':'),
    ('SEMICOLON', r';'),
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),
    ('LBRACKET',  r'\['),
    ('RBRACKET',  r'\]'),

    # Miscellaneous
    ('NEWLINE',   r'\n'),
    ('SKIP',      r'[ \t\r]+'),
    ('ILLEGAL',   r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)

# Token types whose pattern is a fixed literal, mapped to that literal. Used
# to render readable parser errors.
TOKEN_LITERALS: dict[str, str] = {}
for _name, _pattern in TOKEN_SPECIFICATION:
    _literal = _pattern.replace('\\', '')
    if re.escape(_literal) == _pattern:
        TOKEN_LITERALS[_name] = _literal


def describe(token_type: str) -> str:
    """
    Return a readable name for a token type, its literal where it has one.
    """
    literal = TOKEN_LITERALS.get(token_type)
    return f"'{literal}'" if literal is not None else token_type


class Lexer:
    """
    On-demand tokenizer over a single source string.
    """
    def __init__(self, source: str):
        """
        Initialize the lexer.

        Parameters:
            source (str): The MeowScript source text.
        """
        self.source = source
        self.position = 0
        self.line = 1

    def next_token(self) -> Token:
        """
        Scan and return the next token, advancing the cursor.

        Returns:
            Token: The next token; ``EOF`` once the input is exhausted.

        Raises:
            MalformedNumberException: If a numeral does not parse as a float.
        """
        while self.position < len(self.source):
            match_obj = TOKEN_REGEX.match(self.source, self.position)
            kind = match_obj.lastgroup
            value = match_obj.group()
            self.position = match_obj.end()
            line = self.line

            if kind == 'NEWLINE':
                self.line += 1
                continue
            if kind == 'SKIP':
                continue

            if kind == 'NUMBER':
                try:
                    return Token('NUMBER', float(value), line)
                except ValueError:
                    raise MalformedNumberException(value, line) from None
            elif kind == 'STRING':
                self.line += value.count('\n')
                body = value[1:-1] if len(value) > 1 and value.endswith('"') else value[1:]
                return Token('STRING', body, line)
            elif kind == 'IDENT':
                if value in KEYWORDS:
                    keyword_type, keyword_value = KEYWORDS[value]
                    return Token(keyword_type, keyword_value, line)
                return Token('IDENT', value, line)
            return Token(kind, value, line)

        return Token('EOF', None, self.line)

    def __iter__(self):
        """
        Yield tokens up to and including ``EOF``.
        """
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == 'EOF':
                return


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances ending with ``EOF``.

    Raises:
        MalformedNumberException: If a numeral does not parse as a float.
    """
    return list(Lexer(code))

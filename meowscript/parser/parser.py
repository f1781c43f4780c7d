"""
Main parser entry point for MeowScript.

This module defines the `Parser` class, which holds the token cursor (the
current token plus one token of lookahead) and the list of accumulated
syntax errors. The actual parsing routines are split across
`meowscript.parser.expressions` and `meowscript.parser.statements`.

Every parse routine starts with the cursor on the first token of its
construct and leaves it on the last one. Syntax errors are recorded rather
than raised; the caller advances one token and carries on.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from meowscript.lexer import Lexer, Token, describe
from meowscript.operations import Precedence, precedence_of

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """MeowScript parser."""

    def __init__(self, lexer: Lexer, source_file: str = '<stdin>'):
        """
        Initialize the parser over a lexer.

        Parameters:
            lexer (Lexer): The token source.
            source_file (str): The name of the script, for diagnostics.
        """
        self.lexer = lexer
        self.source_file = source_file
        self.errors: list[str] = []
        self.curr_token: Token = None
        self.peek_token: Token = None
        # Fill both cursor slots.
        self.next_token()
        self.next_token()

    def _read(self) -> Token:
        tok = self.lexer.next_token()
        while tok.type == 'COMMENT':
            tok = self.lexer.next_token()
        return tok

    def next_token(self) -> None:
        """
        Advance the cursor by one token.
        """
        self.curr_token = self.peek_token
        self.peek_token = self._read()

    def curr_is(self, token_type: str) -> bool:
        return self.curr_token.type == token_type

    def peek_is(self, token_type: str) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: str) -> bool:
        """
        Advance if the lookahead token has the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            bool: ``True`` if the cursor moved; otherwise an error is
            recorded and the cursor stays put.
        """
        if self.peek_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    def peek_error(self, token_type: str) -> None:
        self.errors.append(
            f"Expected next token to be {describe(token_type)}, "
            f"got {describe(self.peek_token.type)} instead"
        )

    def no_prefix_error(self, token_type: str) -> None:
        self.errors.append(f"No prefix parse function for {describe(token_type)} found")

    def curr_precedence(self) -> Precedence:
        return precedence_of(self.curr_token.type)

    def peek_precedence(self) -> Precedence:
        return precedence_of(self.peek_token.type)


    # Expression wrappers
    def expr(self, precedence: Precedence = Precedence.LOWEST) -> tuple:
        """
        Parse an expression binding tighter than ``precedence``.
        """
        return _expr.parse_expr(self, precedence)

    def expr_list(self, end: str) -> list:
        """
        Parse a comma separated expression list closed by ``end``.
        """
        return _expr.parse_expr_list(self, end)

    def parse_if(self) -> tuple:
        """
        Parse an 'if' expression with optional 'else' and 'else if' arms.
        """
        return _expr.parse_if(self)

    def parse_function(self) -> tuple:
        """
        Parse an anonymous function literal.
        """
        return _expr.parse_function(self)


    # Statement wrappers
    def block(self) -> list:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)


    def parse_program(self) -> list:
        """
        Parse the full input into a list of statements.

        Returns:
            list: The top-level statements. Check ``errors`` before
            evaluating them.
        """
        statements = []
        while not self.curr_is('EOF'):
            stmt = self.statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()
        return statements

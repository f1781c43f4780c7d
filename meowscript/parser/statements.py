"""Statement parsing utilities for MeowScript.

These functions operate on a `meowscript.parser.parser.Parser` instance and
handle the statement forms of the language: bindings, reassignment,
returns, library includes, loop control and expression statements, plus
brace-delimited blocks.

A trailing semicolon is consumed when present and is otherwise optional.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meowscript.parser import Parser


def _skip_semicolon(parser: 'Parser') -> None:
    if parser.peek_is('SEMICOLON'):
        parser.next_token()


def parse_block(parser: 'Parser') -> list:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance, positioned on the opening brace.

    Returns:
        list: The statements of the block, or ``None`` if the input ended
        before the closing brace.
    """
    statements = []
    parser.next_token()
    while not parser.curr_is('RBRACE'):
        if parser.curr_is('EOF'):
            message = "Expected next token to be '}', got EOF instead"
            # Enclosing blocks hit the same EOF.
            if not parser.errors or parser.errors[-1] != message:
                parser.errors.append(message)
            return None
        stmt = parser.statement()
        if stmt is not None:
            statements.append(stmt)
        parser.next_token()
    return statements


def parse_binding(parser: 'Parser') -> tuple:
    """
    Parse a local binding or a reassignment.

    Syntax:
        set <identifier> = <expression>;
        anew <identifier> = <expression>;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('set' | 'anew', name, expr, line_number)
    """
    tok = parser.curr_token
    kind = 'set' if tok.type == 'SET' else 'anew'
    if not parser.expect_peek('IDENT'):
        return None
    name = parser.curr_token.value
    if not parser.expect_peek('ASSIGN'):
        return None
    parser.next_token()
    value = parser.expr()
    if value is None:
        return None
    _skip_semicolon(parser)
    return (kind, name, value, tok.line)


def parse_return(parser: 'Parser') -> tuple:
    """
    Parse a 'return' statement; the value is optional.

    Syntax:
        return [<expression>];

    Returns:
        tuple: ('return', expr_or_None, line_number)
    """
    tok = parser.curr_token
    if parser.peek_is('SEMICOLON') or parser.peek_is('RBRACE') or parser.peek_is('EOF'):
        _skip_semicolon(parser)
        return ('return', None, tok.line)
    parser.next_token()
    value = parser.expr()
    if value is None:
        return None
    _skip_semicolon(parser)
    return ('return', value, tok.line)


def parse_include(parser: 'Parser') -> tuple:
    """
    Parse a library include.

    Syntax:
        include "<name>";

    Returns:
        tuple: ('include', name, line_number)
    """
    tok = parser.curr_token
    if not parser.expect_peek('STRING'):
        return None
    name = parser.curr_token.value
    _skip_semicolon(parser)
    return ('include', name, tok.line)


def parse_loop_control(parser: 'Parser') -> tuple:
    """Parse 'break' or 'continue'."""
    tok = parser.curr_token
    _skip_semicolon(parser)
    return (tok.type.lower(), tok.line)


def parse_expression_statement(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    expr = parser.expr()
    if expr is None:
        return None
    _skip_semicolon(parser)
    return ('expr_stmt', expr, tok.line)


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement, dispatching on its leading token.

    Returns:
        tuple: The statement node, or ``None`` for an empty statement or
        after a syntax error has been recorded.
    """
    tok_type = parser.curr_token.type
    if tok_type == 'SEMICOLON':
        return None
    if tok_type in ('SET', 'ANEW'):
        return parse_binding(parser)
    if tok_type == 'RETURN':
        return parse_return(parser)
    if tok_type == 'INCLUDE':
        return parse_include(parser)
    if tok_type in ('BREAK', 'CONTINUE'):
        return parse_loop_control(parser)
    return parse_expression_statement(parser)

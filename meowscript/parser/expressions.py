"""
Expression parsing utilities for MeowScript.

These functions operate on a `meowscript.parser.parser.Parser` instance and
implement precedence climbing: a prefix parselet chosen by the current
token builds the left operand, then infix parselets (binary operators,
calls and indexing) extend it while the lookahead token binds tighter than
the precedence the caller asked for.
"""

from typing import TYPE_CHECKING

from meowscript.operations import INFIX_OPS, PREFIX_OPS, Precedence

if TYPE_CHECKING:
    from meowscript.parser import Parser


# ---- Prefix parselets ----

def parse_identifier(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    return ('ident', tok.value, tok.line)


def parse_number(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    return ('number', tok.value, tok.line)


def parse_string(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    return ('string', tok.value, tok.line)


def parse_boolean(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    return ('bool', tok.value, tok.line)


def parse_prefix(parser: 'Parser') -> tuple:
    """Parse ``!x``, ``-x`` or ``+x``; the operand binds at prefix precedence."""
    tok = parser.curr_token
    parser.next_token()
    operand = parser.expr(Precedence.PREFIX)
    if operand is None:
        return None
    return ('prefix', PREFIX_OPS[tok.type], operand, tok.line)


def parse_grouped(parser: 'Parser') -> tuple:
    parser.next_token()
    node = parser.expr()
    if not parser.expect_peek('RPAREN'):
        return None
    return node


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse ``if (cond) { ... }`` with optional ``else { ... }``.

    ``else if`` becomes a nested ``if`` expression wrapped as the single
    statement of the alternative block.
    """
    tok = parser.curr_token
    if not parser.expect_peek('LPAREN'):
        return None
    parser.next_token()
    condition = parser.expr()
    if condition is None or not parser.expect_peek('RPAREN'):
        return None
    if not parser.expect_peek('LBRACE'):
        return None
    consequence = parser.block()
    if consequence is None:
        return None

    alternative = None
    if parser.peek_is('ELSE'):
        parser.next_token()
        if parser.peek_is('IF'):
            parser.next_token()
            nested = parser.parse_if()
            if nested is None:
                return None
            alternative = [('expr_stmt', nested, nested[-1])]
        else:
            if not parser.expect_peek('LBRACE'):
                return None
            alternative = parser.block()
            if alternative is None:
                return None

    return ('if', condition, consequence, alternative, tok.line)


def parse_params(parser: 'Parser') -> list:
    """Parse ``(a, b, ...)`` with the cursor on the opening parenthesis."""
    params = []
    if parser.peek_is('RPAREN'):
        parser.next_token()
        return params

    while True:
        parser.next_token()
        if not parser.curr_is('IDENT'):
            parser.errors.append(
                f"Expected identifier as parameter name, got {parser.curr_token.type} instead"
            )
            return None
        params.append(parser.curr_token.value)
        if not parser.peek_is('COMMA'):
            break
        parser.next_token()

    if not parser.expect_peek('RPAREN'):
        return None
    return params


def parse_function(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    if not parser.expect_peek('LPAREN'):
        return None
    params = parse_params(parser)
    if params is None or not parser.expect_peek('LBRACE'):
        return None
    body = parser.block()
    if body is None:
        return None
    return ('function', params, body, tok.line)


def parse_array(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    elements = parser.expr_list('RBRACKET')
    if elements is None:
        return None
    return ('array', elements, tok.line)


def parse_object(parser: 'Parser') -> tuple:
    """Parse ``{ key: value, ... }``; keys are arbitrary expressions."""
    tok = parser.curr_token
    pairs = []
    while not parser.peek_is('RBRACE'):
        parser.next_token()
        key = parser.expr()
        if key is None or not parser.expect_peek('COLON'):
            return None
        parser.next_token()
        value = parser.expr()
        if value is None:
            return None
        pairs.append((key, value))
        if not parser.peek_is('RBRACE') and not parser.expect_peek('COMMA'):
            return None
    parser.next_token()
    return ('object', pairs, tok.line)


def parse_typeof(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    parser.next_token()
    operand = parser.expr(Precedence.PREFIX)
    if operand is None:
        return None
    return ('typeof', operand, tok.line)


def parse_loop(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    if not parser.expect_peek('LBRACE'):
        return None
    body = parser.block()
    if body is None:
        return None
    return ('loop', body, tok.line)


# ---- Infix parselets ----

def parse_infix(parser: 'Parser', left: tuple) -> tuple:
    """Parse a binary operator; the right side recurses at its precedence."""
    tok = parser.curr_token
    precedence = parser.curr_precedence()
    parser.next_token()
    right = parser.expr(precedence)
    if right is None:
        return None
    return ('infix', INFIX_OPS[tok.type], left, right, tok.line)


def parse_call(parser: 'Parser', callee: tuple) -> tuple:
    tok = parser.curr_token
    args = parser.expr_list('RPAREN')
    if args is None:
        return None
    return ('call', callee, args, tok.line)


def parse_index(parser: 'Parser', collection: tuple) -> tuple:
    tok = parser.curr_token
    parser.next_token()
    index = parser.expr()
    if index is None or not parser.expect_peek('RBRACKET'):
        return None
    return ('index', collection, index, tok.line)


PREFIX_PARSELETS = {
    'IDENT': parse_identifier,
    'NUMBER': parse_number,
    'STRING': parse_string,
    'BOOLEAN': parse_boolean,
    'BANG': parse_prefix,
    'MINUS': parse_prefix,
    'PLUS': parse_prefix,
    'LPAREN': parse_grouped,
    'IF': parse_if,
    'FUNC': parse_function,
    'LBRACKET': parse_array,
    'LBRACE': parse_object,
    'TYPEOF': parse_typeof,
    'LOOP': parse_loop,
}

INFIX_PARSELETS = {token_type: parse_infix for token_type in INFIX_OPS}
INFIX_PARSELETS['LPAREN'] = parse_call
INFIX_PARSELETS['LBRACKET'] = parse_index


# ---- Entry points ----

def parse_expr_list(parser: 'Parser', end: str) -> list:
    """
    Parse ``e, e, ...`` up to the ``end`` token; a trailing comma is allowed.

    The cursor starts on the opening delimiter and finishes on ``end``.
    """
    items = []
    if parser.peek_is(end):
        parser.next_token()
        return items

    parser.next_token()
    item = parser.expr()
    if item is None:
        return None
    items.append(item)

    while parser.peek_is('COMMA'):
        parser.next_token()
        if parser.peek_is(end):
            break
        parser.next_token()
        item = parser.expr()
        if item is None:
            return None
        items.append(item)

    if not parser.expect_peek(end):
        return None
    return items


def parse_expr(parser: 'Parser', precedence: Precedence = Precedence.LOWEST) -> tuple:
    """
    Parse an expression whose operators bind tighter than ``precedence``.

    Returns:
        tuple: The expression node, or ``None`` after recording an error.
    """
    prefix = PREFIX_PARSELETS.get(parser.curr_token.type)
    if prefix is None:
        parser.no_prefix_error(parser.curr_token.type)
        return None

    left = prefix(parser)
    while (
        left is not None
        and not parser.peek_is('SEMICOLON')
        and precedence < parser.peek_precedence()
    ):
        infix = INFIX_PARSELETS.get(parser.peek_token.type)
        if infix is None:
            return left
        parser.next_token()
        left = infix(parser, left)
    return left

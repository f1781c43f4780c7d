"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, bitwise and comparison operators, variables, closures, conditionals, loops, arrays,
maps and library inclusion.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via the `execute()` method, and expressions are evaluated using
`eval_expr()`. Both methods operate over structured tuples representing nodes in the AST and
return a value, ``None`` for "no value", or a signal.

2. Environment
The current scope is `self.env`, an `Environment` chained to its enclosing scopes. The
outermost scope is the prelude holding the builtins, so user bindings may shadow them.
Function calls, `if` blocks and loop iterations evaluate in a fresh child scope and restore
`self.env` afterwards.

3. Signals
`return`, `break`, `continue` and runtime errors are not Python exceptions. They are
`ReturnValue`, `BREAK`, `CONTINUE` and `ErrorValue` values handed back from every evaluation
method; each construct checks for them after every sub-evaluation and stops, so the left
operand of an infix expression is always evaluated (and can stop evaluation) before the right.

4. Library Inclusion
`include "name"` loads a built-in or file library (see `meowscript.library`) and layers its
bindings over the current scope as a new child environment. Code after the include sees the
library's bindings; closures created before it do not.

5. Error Handling
Runtime errors surface as `ErrorValue` signals carrying the line they were raised on. Host-level
failures (a missing library file, a malformed number) raise the exceptions in
`meowscript.exceptions`.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import os

from meowscript.environment import UNDEFINED, Environment
from meowscript.library import load_library
from meowscript.objects import (
    BREAK,
    CONTINUE,
    ErrorValue,
    FunctionValue,
    MeowMap,
    NativeFunction,
    ReturnValue,
    display,
    format_number,
    is_error,
    is_hashable_key,
    is_number,
    is_signal,
    is_truthy,
    kind_of,
    values_equal,
)
from meowscript.operations import Op
from meowscript.stdlib import prelude


_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _to_i64(value: float) -> int:
    """Truncate a Number to a signed 64-bit integer, saturating at the bounds."""
    if math.isnan(value):
        return 0
    if value >= _I64_MAX:
        return _I64_MAX
    if value <= _I64_MIN:
        return _I64_MIN
    return int(value)


def _wrap_i64(value: int) -> float:
    return float(((value - _I64_MIN) % (1 << 64)) + _I64_MIN)


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _remainder(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


class Interpreter:
    """Tree-walk interpreter for MeowScript."""

    def __init__(
        self,
        file: str = '<stdin>',
        base_dir: str | None = None,
        loaded_libraries: set[str] | None = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Name of the script being run, used in error locations.
            base_dir (str): Directory file libraries are resolved against.
                Defaults to the working directory.
            loaded_libraries (set[str]): Libraries currently being loaded,
                shared with nested interpreters to detect recursive includes.
        """
        self.file = file
        self.base_dir = base_dir if base_dir is not None else os.getcwd()
        self.loaded_libraries = loaded_libraries if loaded_libraries is not None else set()
        self.builtins = Environment()
        self.builtins.update(prelude())
        self.globals = Environment(self.builtins)
        self.env = self.globals

    def _error(self, message: str, line: int) -> ErrorValue:
        return ErrorValue(message, line, self.file)

    # ------------------------------------------------------------------
    # Programs, blocks and statements
    # ------------------------------------------------------------------

    def evaluate(self, program: list):
        """
        Evaluate a parsed program.

        Parameters:
            program (list): Statement tuples from `Parser.parse_program()`.

        Returns:
            The value of the last statement, the value of a top-level
            ``return``, or the first `ErrorValue` raised.
        """
        result = None
        for stmt in program:
            result = self.execute(stmt)
            if isinstance(result, ReturnValue):
                return result.value
            if is_error(result):
                return result
            if result is BREAK or result is CONTINUE:
                return self._error(f"{result.name} outside of loop", stmt[-1])
        return result

    def eval_block(self, statements: list, env: Environment):
        """
        Evaluate a block in ``env``, stopping at the first signal.
        """
        previous = self.env
        self.env = env
        try:
            result = None
            for stmt in statements:
                result = self.execute(stmt)
                if is_signal(result):
                    return result
            return result
        finally:
            self.env = previous

    def execute(self, stmt: tuple):
        """
        Execute a single statement.

        Parameters:
            stmt (tuple): A ('set' | 'anew' | 'return' | 'expr_stmt' | 'include' |
                'break' | 'continue', ...) tuple.

        Returns:
            The statement's value (``None`` for bindings) or a signal.
        """
        kind = stmt[0]
        line = stmt[-1]

        if kind == 'expr_stmt':
            return self.eval_expr(stmt[1])

        if kind == 'set':
            _, name, expr_node, _ = stmt
            value = self.eval_expr(expr_node)
            if is_signal(value):
                return value
            self.env.set(name, value)
            return None

        if kind == 'anew':
            _, name, expr_node, _ = stmt
            value = self.eval_expr(expr_node)
            if is_signal(value):
                return value
            if not self.env.reassign(name, value):
                return self._error(f"identifier not found: {name}", line)
            return None

        if kind == 'return':
            _, expr_node, _ = stmt
            if expr_node is None:
                return ReturnValue(None)
            value = self.eval_expr(expr_node)
            if is_signal(value):
                return value
            return ReturnValue(value)

        if kind == 'include':
            return self.include_library(stmt[1], line)

        if kind == 'break':
            return BREAK

        if kind == 'continue':
            return CONTINUE

        raise RuntimeError(f"Unknown statement type: {kind} on line {line} in {self.file}")

    def include_library(self, name: str, line: int):
        """
        Load a library and layer its bindings over the current scope.

        Returns:
            ``None``, or the `ErrorValue` the load produced.
        """
        exports = load_library(self, name)
        if is_error(exports):
            return exports.locate(line, self.file)
        layer = Environment(self.env)
        layer.update(exports)
        self.env = layer
        return None

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def eval_expr(self, node: tuple):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node, structured as a tuple.
                The first element is the node type (e.g., 'infix', 'ident'),
                followed by operands and the line number for error reporting.

        Returns:
            The evaluated value, or a signal.
        """
        op = node[0]
        line = node[-1]

        # Literals
        if op in ('number', 'string', 'bool'):
            return node[1]

        if op == 'ident':
            value = self.env.get(node[1])
            if value is UNDEFINED:
                return self._error(f"identifier not found: {node[1]}", line)
            return value

        if op == 'array':
            elements = []
            for element in node[1]:
                value = self.eval_expr(element)
                if is_signal(value):
                    return value
                elements.append(value)
            return elements

        if op == 'object':
            result = MeowMap()
            for key_node, value_node in node[1]:
                key = self.eval_expr(key_node)
                if is_signal(key):
                    return key
                if not is_hashable_key(key):
                    return self._error(f"unusable as hash key: {display(key)}", line)
                value = self.eval_expr(value_node)
                if is_signal(value):
                    return value
                result[key] = value
            return result

        if op == 'prefix':
            _, operator, operand_node, _ = node
            operand = self.eval_expr(operand_node)
            if is_signal(operand):
                return operand
            return self.eval_prefix(operator, operand, line)

        if op == 'infix':
            _, operator, left_node, right_node, _ = node
            left = self.eval_expr(left_node)
            if is_signal(left):
                return left
            right = self.eval_expr(right_node)
            if is_signal(right):
                return right
            return self.eval_infix(operator, left, right, line)

        if op == 'if':
            _, condition_node, consequence, alternative, _ = node
            condition = self.eval_expr(condition_node)
            if is_signal(condition):
                return condition
            if is_truthy(condition):
                return self.eval_block(consequence, Environment(self.env))
            if alternative is not None:
                return self.eval_block(alternative, Environment(self.env))
            return None

        if op == 'function':
            _, params, body, _ = node
            return FunctionValue(params, body, self.env)

        if op == 'call':
            _, callee_node, arg_nodes, _ = node
            callee = self.eval_expr(callee_node)
            if is_signal(callee):
                return callee
            args = []
            for arg_node in arg_nodes:
                arg = self.eval_expr(arg_node)
                if is_signal(arg):
                    return arg
                args.append(arg)
            return self.apply_function(callee, args, line)

        if op == 'index':
            _, collection_node, index_node, _ = node
            collection = self.eval_expr(collection_node)
            if is_signal(collection):
                return collection
            index = self.eval_expr(index_node)
            if is_signal(index):
                return index
            return self.eval_index(collection, index, line)

        if op == 'typeof':
            value = self.eval_expr(node[1])
            if is_signal(value) and not is_error(value):
                return value
            # An error (e.g. an unbound name) reports as 'undefined'.
            return kind_of(value)

        if op == 'loop':
            return self.eval_loop(node[1])

        raise RuntimeError(f"Invalid expression node: {node}")

    def eval_loop(self, body: list):
        """
        Repeat ``body`` until it breaks; the loop's value is Null.
        """
        while True:
            result = self.eval_block(body, Environment(self.env))
            if result is BREAK:
                return None
            if result is CONTINUE:
                continue
            if isinstance(result, (ReturnValue, ErrorValue)):
                return result

    def apply_function(self, callee, args: list, line: int):
        """
        Call a function value with evaluated arguments.

        Parameters:
            callee: A `FunctionValue` or `NativeFunction`.
            args (list): The argument values.
            line (int): Line of the call, for error locations.

        Returns:
            The function's result; ``return`` is unwrapped.
        """
        if isinstance(callee, NativeFunction):
            result = callee(args)
            if is_error(result):
                result.locate(line, self.file)
            return result

        if not isinstance(callee, FunctionValue):
            return self._error(f"not a function: {display(callee)}", line)

        if len(args) != len(callee.params):
            return self._error(
                f"Wrong number of arguments: expected {len(callee.params)}, given {len(args)}",
                line,
            )

        call_env = Environment(callee.env)
        for name, value in zip(callee.params, args):
            call_env.set(name, value)

        result = self.eval_block(callee.body, call_env)
        if isinstance(result, ReturnValue):
            return result.value
        if result is BREAK or result is CONTINUE:
            return self._error(f"{result.name} outside of loop", line)
        return result

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def eval_prefix(self, operator: Op, operand, line: int):
        if operator == Op.NOT:
            return not is_truthy(operand)
        if is_number(operand):
            return -operand if operator == Op.SUB else operand
        return self._error(f"unknown operator: {operator.value}{display(operand)}", line)

    def eval_infix(self, operator: Op, left, right, line: int):
        """
        Apply a binary operator to two evaluated operands.
        """
        if operator == Op.IN:
            return self.eval_membership(left, right, line)

        if operator in (Op.EQ, Op.NE):
            same_kind = kind_of(left) == kind_of(right)
            if not same_kind:
                return self._error(
                    f"type mismatch: {display(left)} {operator.value} {display(right)}", line
                )
            equal = values_equal(left, right)
            return equal if operator == Op.EQ else not equal

        if is_number(left) and is_number(right):
            return self.eval_number_infix(operator, left, right, line)

        if isinstance(left, str) and isinstance(right, str) and operator == Op.ADD:
            return left + right

        if kind_of(left) != kind_of(right):
            return self._error(f"type mismatch: {display(left)} {operator.value} {display(right)}", line)
        return self._error(f"unknown operator: {display(left)} {operator.value} {display(right)}", line)

    def eval_number_infix(self, operator: Op, left: float, right: float, line: int):
        match operator:
            case Op.ADD:
                return left + right
            case Op.SUB:
                return left - right
            case Op.MUL:
                return left * right
            case Op.DIV:
                return _divide(left, right)
            case Op.MOD:
                return _remainder(left, right)
            case Op.LT:
                return left < right
            case Op.LE:
                return left <= right
            case Op.GT:
                return left > right
            case Op.GE:
                return left >= right
            case Op.AND_BITS:
                return _wrap_i64(_to_i64(left) & _to_i64(right))
            case Op.OR_BITS:
                return _wrap_i64(_to_i64(left) | _to_i64(right))
            case Op.XOR_BITS:
                return _wrap_i64(_to_i64(left) ^ _to_i64(right))
            case Op.SHL:
                return _wrap_i64(_to_i64(left) << (_to_i64(right) & 63))
            case Op.SHR:
                return _wrap_i64(_to_i64(left) >> (_to_i64(right) & 63))
        return self._error(
            f"unknown operator: {format_number(left)} {operator.value} {format_number(right)}", line
        )

    def eval_membership(self, left, right, line: int):
        """
        ``left in right``: map keys, array elements, or digits
        of one number's rendering inside another's.
        """
        if isinstance(right, MeowMap):
            return left in right
        if isinstance(right, list):
            return any(values_equal(left, item) for item in right)
        if is_number(left) and is_number(right):
            return format_number(right) in format_number(left)
        return self._error(f"unknown operator: {display(left)} {Op.IN.value} {display(right)}", line)

    def eval_index(self, collection, index, line: int):
        if isinstance(collection, list):
            if not is_number(index):
                return self._error(
                    f"index operator not supported: {display(collection)}[{display(index)}]", line
                )
            return self._array_item(collection, index)

        if isinstance(collection, MeowMap):
            if not is_hashable_key(index):
                return self._error(f"unusable as hash key: {display(index)}", line)
            return collection.get(index)

        return self._error(f"index operator not supported: {display(collection)}", line)

    @staticmethod
    def _array_item(array: list, index: float):
        if not math.isfinite(index):
            return None
        position = int(index)
        if position < 0:
            position += len(array)
        if 0 <= position < len(array):
            return array[position]
        return None

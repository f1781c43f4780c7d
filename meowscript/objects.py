"""Runtime values for MeowScript.

Plain values map onto Python types: Number is ``float``, String is ``str``,
Bool is ``bool``, Null is ``None`` and Array is ``list``. Maps, functions and
the control-flow signals have their own classes below.

Signals (:class:`ReturnValue`, :class:`ErrorValue`, ``BREAK`` and
``CONTINUE``) are ordinary return values of the evaluation methods rather
than Python exceptions, so the interpreter can check for them after every
sub-evaluation and stop in a deterministic order.


File: objects.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math


class FunctionValue:
    """Runtime representation of a function value."""

    def __init__(self, params, body, env):
        self.params = params
        self.body = body
        # Environment active where the literal was evaluated. Shared, not copied.
        self.env = env

    def __repr__(self) -> str:
        return display(self)


class NativeFunction:
    """A host callable taking a list of values and returning a value."""

    def __init__(self, name: str, func):
        self.name = name
        self.func = func

    def __call__(self, args: list):
        return self.func(args)

    def __repr__(self) -> str:
        return f"<native {self.name}>"


class ReturnValue:
    """Signal carrying the value of a ``return`` statement."""

    def __init__(self, value):
        self.value = value

    def __repr__(self) -> str:
        return f"ReturnValue({self.value!r})"


class ErrorValue:
    """Signal carrying a runtime error message."""

    def __init__(self, message: str, line: int | None = None, file: str | None = None):
        self.message = message
        # Where the error surfaced; filled in by the interpreter.
        self.line = line
        self.file = file

    def locate(self, line: int, file: str) -> 'ErrorValue':
        """Record the first source position the error passed through."""
        if self.line is None:
            self.line = line
            self.file = file
        return self

    def describe(self) -> str:
        """Return the message with its source position, when known."""
        if self.line is None:
            return self.message
        head, sep, rest = self.message.partition('\n')
        return f"{head} on line {self.line} in {self.file}{sep}{rest}"

    def __eq__(self, other) -> bool:
        return isinstance(other, ErrorValue) and self.message == other.message

    def __repr__(self) -> str:
        return f"ErrorValue({self.message!r})"


class _LoopSignal:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return self.name.upper()


BREAK = _LoopSignal('break')
CONTINUE = _LoopSignal('continue')

SIGNALS = (ReturnValue, ErrorValue, _LoopSignal)


def is_signal(value) -> bool:
    """Return ``True`` for Return, Error, Break and Continue."""
    return isinstance(value, SIGNALS)


def is_error(value) -> bool:
    """Return ``True`` if ``value`` is an Error signal."""
    return isinstance(value, ErrorValue)


def is_number(value) -> bool:
    """Return ``True`` for Numbers; ``bool`` is deliberately excluded."""
    return isinstance(value, float)


def is_hashable_key(value) -> bool:
    """Return ``True`` for the value kinds usable as Map keys."""
    return isinstance(value, (bool, float, str))


def hash_key(value) -> tuple:
    """
    Return the dictionary key a Map stores ``value`` under.

    The kind is part of the key so that ``true`` and ``1`` (equal in Python)
    stay distinct entries.
    """
    return (kind_of(value), value)


class MeowMap:
    """
    Map value keyed by Number, String or Bool, preserving insertion order.
    """

    def __init__(self, pairs=None):
        self._entries: dict[tuple, tuple] = {}
        for key, value in pairs or ():
            self[key] = value

    def __setitem__(self, key, value) -> None:
        if not is_hashable_key(key):
            raise TypeError(f"unusable as hash key: {display(key)}")
        self._entries[hash_key(key)] = (key, value)

    def __getitem__(self, key):
        return self._entries[hash_key(key)][1]

    def get(self, key, default=None):
        entry = self._entries.get(hash_key(key))
        return default if entry is None else entry[1]

    def __contains__(self, key) -> bool:
        return is_hashable_key(key) and hash_key(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return (key for key, _ in self._entries.values())

    def items(self):
        return list(self._entries.values())

    def keys(self):
        return [key for key, _ in self._entries.values()]

    def values(self):
        return [value for _, value in self._entries.values()]

    def __eq__(self, other) -> bool:
        if not isinstance(other, MeowMap) or len(self) != len(other):
            return False
        for key, value in self.items():
            if key not in other or not values_equal(value, other[key]):
                return False
        return True

    def __repr__(self) -> str:
        return display(self)


def kind_of(value) -> str:
    """
    Return the name of a value's kind, as reported by ``typeof``.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, MeowMap):
        return 'object'
    return 'undefined'


def is_truthy(value) -> bool:
    """Only ``false`` and Null are falsy."""
    return not (value is None or value is False)


def values_equal(left, right) -> bool:
    """
    Structural, kind-strict equality between two values.
    """
    if isinstance(left, NativeFunction) or isinstance(right, NativeFunction):
        return left is right
    if isinstance(left, FunctionValue) or isinstance(right, FunctionValue):
        return left is right
    if kind_of(left) != kind_of(right):
        return False
    if isinstance(left, list):
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    return left == right


def format_number(value: float) -> str:
    """
    Render a Number: integral values without a fraction, ``NaN`` and ``inf``
    spelled out.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if value.is_integer():
        return str(int(value))
    return repr(value)


def display(value) -> str:
    """
    Return the canonical text rendering of a value.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return '[' + ', '.join(display(item) for item in value) + ']'
    if isinstance(value, MeowMap):
        return '{' + ', '.join(f"{display(k)}: {display(v)}" for k, v in value.items()) + '}'
    if isinstance(value, FunctionValue):
        return f"fn({', '.join(value.params)}) {{ ... }}"
    if isinstance(value, NativeFunction):
        return '[inbuilt fn]'
    if isinstance(value, ErrorValue):
        return value.message
    if isinstance(value, ReturnValue):
        return display(value.value)
    if isinstance(value, _LoopSignal):
        return value.name
    return str(value)

"""Lexical scopes for MeowScript.

An :class:`Environment` is a binding table with a link to its enclosing
scope. Environments are shared by reference: every closure created in a
scope and every call frame below it hold the same instance, so a
reassignment made through one holder is seen by all of them.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class _Undefined:
    """Marker for a name with no binding in the scope chain."""

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class Environment:
    """
    Chained, mutable binding table.
    """
    def __init__(self, outer: 'Environment' = None):
        """
        Initialize an empty scope.

        Parameters:
            outer (Environment): The enclosing scope, or ``None`` for the
                outermost one.
        """
        self.bindings: dict = {}
        self.outer = outer

    def get(self, name: str):
        """
        Look a name up locally, then in the enclosing scopes.

        Returns:
            The bound value, or ``UNDEFINED`` if no scope binds ``name``.
        """
        env = self
        while env is not None:
            if name in env.bindings:
                return env.bindings[name]
            env = env.outer
        return UNDEFINED

    def set(self, name: str, value) -> None:
        """
        Bind ``name`` in this scope, shadowing any outer binding.
        """
        self.bindings[name] = value

    def reassign(self, name: str, value) -> bool:
        """
        Overwrite the nearest existing binding of ``name``.

        Returns:
            bool: ``False`` if no scope in the chain binds ``name``.
        """
        env = self
        while env is not None:
            if name in env.bindings:
                env.bindings[name] = value
                return True
            env = env.outer
        return False

    def update(self, bindings: dict) -> None:
        self.bindings.update(bindings)

    def exports(self, stop: 'Environment') -> dict:
        """
        Collect the bindings from this scope up to and including ``stop``.

        Inner bindings win over outer ones of the same name. ``stop`` must be
        on the chain.
        """
        chain = []
        env = self
        while env is not None:
            chain.append(env)
            if env is stop:
                break
            env = env.outer
        collected = {}
        for env in reversed(chain):
            collected.update(env.bindings)
        return collected

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not UNDEFINED

    def __repr__(self) -> str:
        return f"Environment({sorted(self.bindings)})"

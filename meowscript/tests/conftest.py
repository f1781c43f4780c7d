"""
Pytest fixtures for MeowScript tests.
"""
import pytest

from meowscript.interpreter import Interpreter


@pytest.fixture
def interpreter(tmp_path):
    """
    A fresh interpreter whose file libraries resolve against ``tmp_path``.
    """
    return Interpreter("<test>", str(tmp_path))

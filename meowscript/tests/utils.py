"""
Helpers shared across MeowScript tests.
"""
from meowscript.interpreter import Interpreter
from meowscript.lexer import Lexer
from meowscript.parser import Parser


def parse_with_errors(source: str):
    """
    Parse source code and return the AST together with the parser errors.
    """
    parser = Parser(Lexer(source), "<test>")
    return parser.parse_program(), parser.errors


def parse_source(source: str):
    """
    Parse source code and return the AST, failing on syntax errors.
    """
    program, errors = parse_with_errors(source)
    assert not errors, errors
    return program


def run_source(source: str, interpreter: Interpreter | None = None, base_dir=None):
    """
    Evaluate source code and return the program's value.
    """
    if interpreter is None:
        interpreter = Interpreter("<test>", base_dir)
    return interpreter.evaluate(parse_source(source))

"""
MeowScript Interpreter

This is the main entry point for the MeowScript interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into tokens on demand.
3. The Parser processes tokens into an AST, collecting syntax errors.
4. The Interpreter walks the AST, evaluating expressions and executing statements.
5. The final value (if any) or the runtime error is printed.

Set the MEOWDEBUG environment variable to dump the tokens and AST before evaluation.
"""
import os
import sys

from meowscript import Interpreter, Lexer, Parser, tokenize
from meowscript.objects import display, is_error

SOURCE_SUFFIX = '.meow'
PROMPT = '>> '
CONTINUATION_PROMPT = '.. '


def print_usage():
    """
    Print usage.
    """
    print()
    print("MeowScript Interpreter")
    print()
    print("Usage:")
    print("    meow [run] <script.meow>")
    print()
    print("Arguments:")
    print("    <script.meow>")
    print("        Path to a MeowScript source file to execute. The file must")
    print("        have the extension .meow.")
    print()
    print("Example:")
    print("    meow run hello.meow")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    MEOWDEBUG")
    print("        When set, print the tokens and AST before evaluating.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def print_errors(messages):
    """
    Print error messages, one tab-indented line each.
    """
    for message in messages:
        for line in message.splitlines():
            print(f"\t{line.lstrip()}")


def print_result(result, show_null: bool = False) -> bool:
    """
    Print an evaluation result.

    Returns:
        bool: ``False`` if the result was a runtime error.
    """
    if is_error(result):
        print_errors([result.describe()])
        return False
    if result is not None or show_null:
        print(display(result))
    return True


def run_script(script_name: str) -> int:
    """
    Run a MeowScript script
    """
    if not script_name.endswith(SOURCE_SUFFIX):
        print(f"File must have the extension {SOURCE_SUFFIX}")
        return 1

    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()

        parser = Parser(Lexer(code), script_name)
        ast = parser.parse_program()

        if os.environ.get('MEOWDEBUG'):
            debug_print_tokens_ast(tokenize(code), ast)

        if parser.errors:
            print_errors(parser.errors)
            return 1

        base_dir = os.path.dirname(os.path.abspath(script_name))
        interpreter = Interpreter(script_name, base_dir)
        return 0 if print_result(interpreter.evaluate(ast)) else 1
    except Exception as e:
        print(f"{type(e).__name__}: {e}")
        return 1


def run_repl():
    """
    Run the interactive REPL
    """
    print("MeowScript Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = PROMPT if not buffer else CONTINUATION_PROMPT
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                parser = Parser(Lexer(source), "<stdin>")
                ast = parser.parse_program()
                if parser.errors:
                    # An unclosed block reports EOF; keep reading lines.
                    if any("EOF" in e for e in parser.errors):
                        continue
                    print_errors(parser.errors)
                    buffer.clear()
                    continue

                if os.environ.get('MEOWDEBUG'):
                    debug_print_tokens_ast(tokenize(source), ast)

                print_result(interpreter.evaluate(ast), show_null=True)
                buffer.clear()
            except Exception as e:
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - ``run <script>`` or a single script path: run the script.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 2 and args[0] == 'run':
        return run_script(args[1])
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))

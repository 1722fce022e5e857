"""Line-oriented read-eval-print loop.

Lines are buffered until they read as complete forms; an incomplete form
switches the prompt to a continuation marker instead of reporting an error.
"""

from __future__ import annotations

from slisp.errors import ReaderIncomplete, SLispError, format_error
from slisp.interpreter import Interpreter
from slisp.printer import print_term
from slisp.reader.parser import read_all

CONTINUATION_PROMPT = "...\t"


class Repl:
    def __init__(self, interpreter: Interpreter | None = None):
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.buffer = ""

    @property
    def prompt(self) -> str:
        if self.buffer:
            return CONTINUATION_PROMPT
        return f"{self.interpreter.current_namespace.name}> "

    def feed(self, line: str) -> list[str]:
        """Add one input line; return the lines of output it produced."""
        self.buffer += line + "\n"
        try:
            forms = read_all(self.buffer)
        except ReaderIncomplete:
            return []
        except SLispError as e:
            self.buffer = ""
            return [format_error(e)]

        self.buffer = ""
        output: list[str] = []
        for form in forms:
            try:
                output.append(print_term(self.interpreter.eval_form(form)))
            except SLispError as e:
                output.append(format_error(e))
                break
        return output

    def run(self) -> int:
        try:
            import readline as _  # noqa: F401
        except ImportError:
            pass

        while True:
            try:
                line = input(self.prompt)
            except KeyboardInterrupt:
                print()
                self.buffer = ""
                continue
            except EOFError:
                print()
                return 0
            for out in self.feed(line):
                print(out)

"""Error taxonomy for SLisp.

LexerError and ReaderIncomplete come out of the reader; GeneralError and
LispRuntimeError are raised by special forms and builtins. When one of the
latter escapes a level of the eval loop it is re-raised as a
RuntimeErrorWithForm carrying the form that failed.
"""

from __future__ import annotations

from typing import Any


class SLispError(Exception):
    """Base class for all SLisp errors"""
    pass


class LexerError(SLispError):
    """Raised on a malformed token; message carries the source line and a caret"""

    def __init__(self, msg: str, line: int, column: int, source_line: str):
        self.msg = msg
        self.line = line
        self.column = column
        self.source_line = source_line
        super().__init__(self.diagnostic())

    def diagnostic(self) -> str:
        caret = " " * (self.column - 1) + "^"
        return f"{self.msg} at line {self.line}, column {self.column}:\n{self.source_line}\n{caret}"


class ReaderIncomplete(SLispError):
    """Raised when input ends before a list is closed; more input may complete it"""

    def __init__(self, msg: str = "expected ')'"):
        super().__init__(msg)


class ReaderError(SLispError):
    """Raised for structural reader errors such as an unexpected ')'"""


class GeneralError(SLispError):
    """Argument shape, arity or type contract violation"""


class LispRuntimeError(SLispError):
    """Evaluation-time failure: unbound symbol, bad call target, arity mismatch"""


class RuntimeErrorWithForm(LispRuntimeError):
    """A GeneralError/LispRuntimeError re-raised with the offending form attached"""

    def __init__(self, error: SLispError, form: Any):
        self.error = error
        self.form = form
        super().__init__(str(error))


def format_error(exc: BaseException) -> str:
    """Render an error the way the REPL and the file runner report it."""
    # Local import: printer depends on the types package which imports errors.
    from slisp.printer import print_term

    if isinstance(exc, RuntimeErrorWithForm):
        prefix = "Runtime Error" if isinstance(exc.error, LispRuntimeError) else "Error"
        return f"{prefix}: {exc.error}\n{print_term(exc.form)}"
    if isinstance(exc, LispRuntimeError):
        return f"Runtime Error: {exc}"
    if isinstance(exc, GeneralError):
        return f"Error: {exc}"
    if isinstance(exc, ReaderIncomplete):
        return "Syntax Error: expected ')'"
    if isinstance(exc, (LexerError, ReaderError)):
        return f"Syntax Error: {exc}"
    return str(exc)

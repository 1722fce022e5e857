import logging
import os
import sys

from slisp.errors import SLispError, format_error
from slisp.interpreter import Interpreter
from slisp.repl import Repl


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=os.environ.get("SLISP_LOG_LEVEL", "WARNING").upper())

    interpreter = Interpreter()
    if not args:
        return Repl(interpreter).run()

    for filename in args:
        try:
            interpreter.load_file(filename)
        except SLispError as e:
            print(format_error(e))
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

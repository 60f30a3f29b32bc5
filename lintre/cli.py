"""Command-line entry point: evaluate a source file and print the result."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from .interpreter import EvalError, Interpreter
from .parser import ParseError, parse


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interpreter on a file; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) == 1:
        debug, filename = False, args[0]
    elif len(args) == 2 and args[0] == "-b":
        debug, filename = True, args[1]
    else:
        print("Usage: lintre [-b] <source-file>", file=sys.stderr)
        return 1

    try:
        code = Path(filename).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Failed to read source file: {exc}", file=sys.stderr)
        return 1

    try:
        tree = parse(code)
    except ParseError as exc:
        print(f"Parse error: {exc}", file=sys.stderr)
        return 1

    interpreter = Interpreter(debug)
    try:
        result = interpreter.eval(tree)
    except EvalError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 0
    print(interpreter.format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
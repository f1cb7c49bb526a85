import argparse
import logging
import sys
from pathlib import Path

from schemer.config import get_library_roots, get_log_level, get_recursion_limit
from schemer.errors import SchemeError
from schemer.interpreter import Interpreter
from schemer.repl import Repl
from schemer.types.quit import Quit


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="schemer", description="A small Scheme evaluator")
    parser.add_argument("files", nargs="*", type=Path, help="source files to evaluate before the REPL")
    parser.add_argument(
        "-I", "--library-path", action="append", type=Path, default=[],
        help="extra directory searched by (require ...); may be repeated",
    )
    parser.add_argument("--no-repl", action="store_true", help="exit after evaluating the files")
    parser.add_argument("--log-level", default=get_log_level(), help="logging level (default: %(default)s)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    interp = Interpreter(library_paths=[*args.library_path, *get_library_roots()])
    for path in args.files:
        try:
            if interp.load_file(path) is Quit:
                return 0
        except (SchemeError, OSError) as ex:
            print(f"error: {path}: {ex}", file=sys.stderr)
            return 1

    if args.no_repl:
        return 0
    return Repl(interp, sys.stdin, sys.stdout, prompt=sys.stdin.isatty()).run()


if __name__ == "__main__":
    sys.exit(main())

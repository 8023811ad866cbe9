"""
__main__.py – CLI entry-point for the callc package.

Usage:  python -m callc FILE.call

Compiles FILE.call, prints the bytecode, and writes it to FILE.calldata
next to the input.  Exits with status 1 on any error, in which case no
output file is written.
"""

from __future__ import annotations

import argparse
import sys

from .compiler import compile_file
from .errors import CompileError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m callc",
        description="Compile a .call contract-call script into call bytecode.",
    )
    parser.add_argument("file", nargs="?", metavar="FILE.call",
                        help="Source file to compile.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)

    if args.file is None:
        parser.print_usage(sys.stderr)
        return 1

    try:
        result, out_path = compile_file(args.file)
    except (CompileError, OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Compiled bytecode:")
    print(result.hex())
    print(f"Output written to: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
minicc command line driver

Usage: minicc INPUT OUTPUT [--syntax {att,intel}] [--strict]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import compile_source, __version__
from .ast import ASTPrinter
from .config import CompilerOptions, configure_logging
from .codegen import DIALECTS
from .errors import MiniccError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="minicc",
        description="Compile a 'return <integer>' C program to x86 assembly")
    ap.add_argument("input", type=Path, help="Source file")
    ap.add_argument("output", type=Path, help="Assembly output path")
    ap.add_argument("--syntax", choices=sorted(DIALECTS), default="att",
                    help="Assembly syntax to emit (default: att)")
    ap.add_argument("--strict", action="store_true",
                    help="Fail on unexpected characters or unrecognized declarations")
    ap.add_argument("--dump-tokens", action="store_true", help="Print the token stream")
    ap.add_argument("--dump-ast", action="store_true", help="Print the syntax tree")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="Debug logging")
    ap.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(-1 if args.quiet else args.verbose)
    
    try:
        source = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Reading %s failed: %s", args.input, e)
        print("Could not open input file", file=sys.stderr)
        return 1
    
    options = CompilerOptions(syntax=args.syntax, strict=args.strict)
    try:
        result = compile_source(source, options, str(args.input))
    except MiniccError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    
    if args.dump_tokens:
        for token in result.tokens:
            print(repr(token))
    if args.dump_ast:
        print(ASTPrinter().print(result.program))
    
    try:
        args.output.write_text(result.assembly, encoding="utf-8")
    except OSError as e:
        logger.debug("Writing %s failed: %s", args.output, e)
        print("Could not open output file", file=sys.stderr)
        return 1
    
    print("Compilation successful")
    return 0


if __name__ == "__main__":
    sys.exit(main())

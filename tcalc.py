"""
TypeCalc command line.

This is the main entry point for the TypeCalc front end.

Workflow:
1. The source file named on the command line is opened.
2. The Lexer turns its characters into tokens on demand.
3. The Parser checks each statement against the grammar and the symbol
   table, evaluating expressions as it goes.
4. A summary of errors and the final symbol table is printed.

Exit status is 0 on success, 1 if the program had syntax or semantic errors,
and 2 for usage errors or an unreadable source file.
"""
import argparse
import sys

from typecalc import __version__
from typecalc.config import Settings
from typecalc.exceptions import SourceUnavailableException
from typecalc.runner import run_file

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="tcalc",
        description="Parse, check and evaluate a TypeCalc source file.",
        allow_abbrev=False,
    )
    parser.add_argument("source", help="Path to a TypeCalc source file")
    parser.add_argument(
        "--no-trace",
        dest="trace",
        action="store_false",
        default=None,
        help="Do not print a trace line for each token",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Longest identifier or number before truncation (default: 49)",
    )
    parser.add_argument(
        "--max-symbols",
        type=int,
        default=None,
        help="Maximum number of variables (default: unlimited)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Parameters:
        argv (list[str]): Arguments without the program name.
    """
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_OK if e.code == 0 else EXIT_USAGE

    try:
        settings = Settings.from_env().with_overrides(
            trace=args.trace,
            max_lexeme_length=args.max_length,
            max_capacity=args.max_symbols,
        )
    except ValueError as e:
        print(f"Invalid setting: {e}")
        return EXIT_USAGE

    try:
        result = run_file(args.source, settings)
    except SourceUnavailableException as e:
        print(e)
        return EXIT_USAGE
    return result.exit_code


def cli() -> None:
    """
    Console script wrapper.
    """
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()

"""CLI entry point for gomust."""
# PYTHON_ARGCOMPLETE_OK

import argparse
import sys

import argcomplete

from ..analysis.aliases import ALIAS_STRATEGIES
from .helpers import configure_logging, load_env_files
from .completers import PackageDirCompleter
from .generate import cmd_generate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gomust",
        description="Generate Must wrappers for Go functions returning an error",
    )
    parser.add_argument(
        "directory", help="Go package directory to scan"
    ).completer = PackageDirCompleter()
    parser.add_argument(
        "-tags", "--tags", default="",
        help="Build tags (recorded with the output, not evaluated)",
    )
    parser.add_argument(
        "-n", dest="dry_run", action="store_true",
        help="Do not write file; print the generated output instead",
    )
    parser.add_argument(
        "-u", dest="update", action="store_true",
        help="Update: regenerate using the settings of the existing output",
    )
    parser.add_argument(
        "--output", "-o",
        help="Output file name inside the package directory (default: $GOMUST_OUTPUT or gomust.txt)",
    )
    parser.add_argument(
        "--alias-strategy",
        choices=sorted(ALIAS_STRATEGIES),
        help="How to derive the alias of an unrenamed import (default: segment)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose output"
    )
    return parser


def main(argv=None):
    # Load environment variables from .env file(s)
    load_env_files()

    parser = build_parser()

    # Enable argcomplete
    argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    sys.exit(cmd_generate(args))


if __name__ == "__main__":
    main()

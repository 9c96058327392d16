"""
Command line entry point.

Reads a command file, writes its transcript and reports faults on stderr.
"""

import argparse
import logging
import sys

from dirsim.exceptions import TranscriptAbortedError
from dirsim.execution.transcript import process_commands
from dirsim.settings import Settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_IO_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirsim",
        description="Run directory commands from a file and write the transcript",
    )
    parser.add_argument(
        "--input", "-input", default="input.txt", metavar="FILE", help="input file"
    )
    parser.add_argument(
        "--output", "-output", default="output.txt", metavar="FILE", help="output file"
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="report unknown commands and arity errors instead of aborting",
    )
    parser.add_argument(
        "--reject-cycles",
        action="store_true",
        help="refuse to move a directory into itself or its descendants",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = Settings(
        abort_on_fault=not args.lenient, reject_cyclic_moves=args.reject_cycles
    )

    try:
        written = process_commands(args.input, args.output, settings)
    except TranscriptAbortedError as aborted:
        print(f"dirsim: {aborted}", file=sys.stderr)
        return EXIT_ABORTED
    except OSError as e:
        print(f"dirsim: cannot process {args.input}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    logger.info("Wrote %d lines to %s", written, args.output)
    return EXIT_OK

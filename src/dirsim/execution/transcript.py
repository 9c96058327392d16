"""
Transcript generation for a stream of command lines.

For every non-blank input line the transcript holds an echo record followed
by the command's result lines. A command fault stops the run; the lines
produced for earlier commands are handed back on the raised exception.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from dirsim.core.types import OutputLines
from dirsim.exceptions import CommandFault, FaultContext, TranscriptAbortedError
from dirsim.execution.executor import CommandExecutor
from dirsim.parsing import CommandParser
from dirsim.rendering.echo import render_echo
from dirsim.settings import Settings

logger = logging.getLogger(__name__)

ENCODING_ERRORS = "surrogateescape"


def is_blank(line: str) -> bool:
    """Return True for lines holding nothing but separator whitespace."""
    return not line or CommandParser.WHITESPACE_PATTERN.fullmatch(line) is not None


def iter_transcript(
    lines: Iterable[str], executor: CommandExecutor | None = None
) -> Iterator[str]:
    """
    Yield transcript lines for a stream of commands.

    A line's echo record is only yielded once the command has run, so a
    faulting line contributes nothing to the transcript.

    Params:
        lines: Command lines without line terminators
        executor: Executor to run the commands, a fresh one when omitted

    Raises:
        TranscriptAbortedError: When a command fault stops the run
    """
    executor = executor or CommandExecutor()
    for line_number, line in enumerate(lines, start=1):
        if is_blank(line):
            continue
        try:
            results = executor.execute(line)
        except CommandFault as fault:
            context = FaultContext(line_number=line_number, command_text=line)
            logger.error("Aborting transcript: %s\n%s", fault, context.format_location())
            raise TranscriptAbortedError(fault, context) from fault
        yield render_echo(line, executor.settings)
        yield from results


def run_transcript(lines: Iterable[str], settings: Settings | None = None) -> OutputLines:
    """
    Run a stream of commands against a fresh filesystem.

    Params:
        lines: Command lines without line terminators
        settings: Optional settings for the run

    Returns:
        All transcript lines

    Raises:
        TranscriptAbortedError: When a command fault stops the run, with the
            lines produced so far in ``partial_output``
    """
    output: OutputLines = []
    try:
        for record in iter_transcript(lines, CommandExecutor(settings=settings)):
            output.append(record)
    except TranscriptAbortedError as aborted:
        aborted.partial_output = list(output)
        raise
    return output


def read_command_lines(path: str | Path) -> list[str]:
    """
    Read command lines from a file.

    Lines are split on ``\\n`` only, with a trailing ``\\r`` removed; a lone
    ``\\r`` stays part of its line and a final terminator does not start an
    extra line. Bytes that are not valid UTF-8 are kept as surrogate escapes
    so ``write_transcript`` reproduces them unchanged.
    """
    text = Path(path).read_bytes().decode("utf-8", errors=ENCODING_ERRORS)
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def write_transcript(path: str | Path, lines: Iterable[str]) -> None:
    """Write transcript lines to a file, each newline-terminated."""
    with open(
        path, "w", encoding="utf-8", errors=ENCODING_ERRORS, newline="\n"
    ) as output_file:
        for line in lines:
            output_file.write(line + "\n")


def process_commands(
    input_path: str | Path, output_path: str | Path, settings: Settings | None = None
) -> int:
    """
    Process a command file and write its transcript.

    The output file is truncated. If a fault aborts the run, the transcript
    lines produced before the faulting command are written first.

    Params:
        input_path: File with one command per line
        output_path: File receiving the transcript
        settings: Optional settings for the run

    Returns:
        Number of transcript lines written

    Raises:
        OSError: If the input file cannot be read or the output file written
        TranscriptAbortedError: When a command fault stops the run
    """
    commands = read_command_lines(input_path)
    logger.info("Processing %d command lines from %s", len(commands), input_path)
    try:
        output = run_transcript(commands, settings)
    except TranscriptAbortedError as aborted:
        write_transcript(output_path, aborted.partial_output)
        raise
    write_transcript(output_path, output)
    return len(output)

"""
Parser for directory simulator command lines.

A command line is a keyword optionally followed by arguments. Whitespace runs
collapse to a single space before the line is split into tokens; the line is
not trimmed, so leading whitespace yields an empty keyword.

Argument extraction follows a fixed legacy grammar:
- single-argument commands (``mkdir``, ``cd``) read their argument from a
  fixed column, everything from that offset on, trimmed
- the two-argument command (``mv``) needs exactly three tokens
"""

import re
from enum import Enum

from attrs import frozen

from dirsim.exceptions import ArityError, UnknownCommandError
from dirsim.settings import DEFAULT_SETTINGS, Settings


class CommandType(Enum):
    """Recognized command keywords."""

    DIR = "dir"
    MKDIR = "mkdir"
    UP = "up"
    CD = "cd"
    TREE = "tree"
    MV = "mv"


@frozen
class ParsedCommand:
    """
    A command line split into keyword and arguments.

    Params:
        command_type: The recognized command
        arguments: Extracted arguments, in order
        raw_text: The original command line
    """

    command_type: CommandType
    arguments: tuple[str, ...] = ()
    raw_text: str = ""

    def __str__(self) -> str:
        """Return a string representation of the command."""
        return " ".join((self.command_type.value, *self.arguments))


class CommandParser:
    """Parser for line-oriented filesystem commands."""

    # ASCII whitespace, vertical tab excluded
    WHITESPACE_PATTERN = re.compile(r"[\t\n\f\r ]+")

    SINGLE_ARGUMENT_COMMANDS = {CommandType.MKDIR, CommandType.CD}
    ARGUMENT_PAIR_COMMANDS = {CommandType.MV}

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or DEFAULT_SETTINGS

    def tokenize(self, line: str) -> list[str]:
        """
        Split a line into whitespace-delimited tokens.

        Leading and trailing whitespace produce empty tokens at either end.

        Params:
            line: Raw command line

        Returns:
            List of tokens, never empty
        """
        return self.WHITESPACE_PATTERN.sub(" ", line).split(" ")

    def keyword(self, line: str) -> str:
        """Return the first token of a line, empty for blank lines."""
        return self.tokenize(line)[0]

    def single_argument(self, line: str) -> str:
        """
        Extract the argument of a single-argument command.

        The argument starts at a fixed offset regardless of where the keyword
        ends, and runs to the end of the line.

        Raises:
            ArityError: If the line ends before the argument column or the
                argument is empty
        """
        offset = self.settings.arg_offset
        if len(line) <= offset:
            raise ArityError(line)
        argument = line[offset:].strip()
        if not argument:
            raise ArityError(line)
        return argument

    def argument_pair(self, line: str) -> tuple[str, str]:
        """
        Extract both arguments of a two-argument command.

        Raises:
            ArityError: If the line does not have exactly two arguments
        """
        chunks = self.tokenize(line)
        if len(chunks) != 3:
            raise ArityError(line)
        return chunks[1], chunks[2]

    def parse(self, line: str) -> ParsedCommand | None:
        """
        Parse a command line.

        Params:
            line: Raw command line

        Returns:
            ParsedCommand, or None when the keyword is empty

        Raises:
            UnknownCommandError: If the keyword is not recognized
            ArityError: If the arguments do not match the command's grammar
        """
        keyword = self.keyword(line)
        if not keyword:
            return None

        try:
            command_type = CommandType(keyword)
        except ValueError:
            raise UnknownCommandError(line) from None

        if command_type in self.SINGLE_ARGUMENT_COMMANDS:
            arguments: tuple[str, ...] = (self.single_argument(line),)
        elif command_type in self.ARGUMENT_PAIR_COMMANDS:
            arguments = self.argument_pair(line)
        else:
            arguments = ()

        return ParsedCommand(command_type, arguments, raw_text=line)


def parse_command(line: str, settings: Settings | None = None) -> ParsedCommand | None:
    """
    Convenience function to parse a command line.

    Params:
        line: The command line to parse
        settings: Optional settings, defaults reproduce the legacy grammar

    Returns:
        ParsedCommand, or None for a line with an empty keyword

    Raises:
        UnknownCommandError: If the keyword is not recognized
        ArityError: If the arguments are malformed
    """
    parser = CommandParser(settings)
    return parser.parse(line)

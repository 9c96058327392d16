"""
Command line parsing for the directory simulator.

This package provides the tokenizer and the fixed argument grammar used to
turn raw command lines into parsed commands.
"""

from dirsim.parsing.parser import (
    CommandParser,
    CommandType,
    ParsedCommand,
    parse_command,
)

__all__ = [
    "CommandParser",
    "CommandType",
    "ParsedCommand",
    "parse_command",
]

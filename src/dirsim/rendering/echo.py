"""
Echo records for the transcript.

Each non-blank input line is reproduced before its results: the keyword after
a fixed label, the first argument at one fixed column and the second argument
at another. Further tokens are not echoed.
"""

from dirsim.parsing.parser import CommandParser
from dirsim.settings import DEFAULT_SETTINGS, Settings

ECHO_LABEL = "Command: "


def render_echo(line: str, settings: Settings | None = None) -> str:
    """
    Format the echo record of a command line.

    Params:
        line: Raw command line
        settings: Column settings

    Returns:
        The echo record, empty for an empty line
    """
    if not line:
        return ""
    settings = settings or DEFAULT_SETTINGS
    chunks = CommandParser(settings).tokenize(line)

    echo = ECHO_LABEL + chunks[0]
    if len(chunks) > 1:
        echo = echo.ljust(settings.first_arg_column - 1) + chunks[1]
    if len(chunks) > 2:
        echo = echo.ljust(settings.second_arg_column - 1) + chunks[2]
    return echo

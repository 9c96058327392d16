"""
Command execution against the simulated filesystem.

The executor consumes one command line at a time and produces the result
lines for it. Filesystem errors are reported as a single result line and
leave the filesystem untouched; command faults propagate to the caller
unless the settings ask for them to be reported the same way.
"""

import logging
from collections.abc import Callable

from dirsim.core.filesystem import Filesystem
from dirsim.core.types import OutputLines
from dirsim.exceptions import CommandFault, FilesystemError
from dirsim.parsing.parser import CommandParser, CommandType, ParsedCommand
from dirsim.rendering.listing import render_listing
from dirsim.rendering.tree_view import render_tree
from dirsim.settings import Settings

logger = logging.getLogger(__name__)


class CommandExecutor:
    """
    Dispatches parsed commands to filesystem operations and renderers.

    Params:
        filesystem: Session state to operate on, a fresh one when omitted
        settings: Settings for parsing and rendering, the filesystem's when omitted
    """

    def __init__(
        self, filesystem: Filesystem | None = None, settings: Settings | None = None
    ):
        if filesystem is None:
            filesystem = Filesystem(settings)
        self.filesystem = filesystem
        self.settings = settings or filesystem.settings
        self.parser = CommandParser(self.settings)
        self._handlers: dict[CommandType, Callable[[ParsedCommand], OutputLines]] = {
            CommandType.DIR: self._handle_dir,
            CommandType.MKDIR: self._handle_mkdir,
            CommandType.UP: self._handle_up,
            CommandType.CD: self._handle_cd,
            CommandType.TREE: self._handle_tree,
            CommandType.MV: self._handle_mv,
        }

    def execute(self, line: str) -> OutputLines:
        """
        Execute one command line.

        Params:
            line: Raw command line

        Returns:
            Result lines, empty when the command prints nothing

        Raises:
            UnknownCommandError: If the keyword is unknown and faults abort
            ArityError: If the arguments are malformed and faults abort
        """
        try:
            command = self.parser.parse(line)
        except CommandFault as fault:
            if self.settings.abort_on_fault:
                raise
            logger.warning("Skipping faulty command %r: %s", line, fault)
            return [str(fault)]

        if command is None:
            return []

        logger.debug("Executing %s", command)
        return self._handlers[command.command_type](command)

    def _run_operation(self, operation: Callable[..., object], *args: str) -> OutputLines:
        try:
            operation(*args)
        except FilesystemError as error:
            logger.debug("%s failed for %r: %s", operation.__name__, error.name, error)
            return [str(error)]
        return []

    def _handle_dir(self, command: ParsedCommand) -> OutputLines:
        return render_listing(self.filesystem, self.settings)

    def _handle_mkdir(self, command: ParsedCommand) -> OutputLines:
        return self._run_operation(self.filesystem.add_subdir, *command.arguments)

    def _handle_up(self, command: ParsedCommand) -> OutputLines:
        return self._run_operation(self.filesystem.up)

    def _handle_cd(self, command: ParsedCommand) -> OutputLines:
        return self._run_operation(self.filesystem.cd, *command.arguments)

    def _handle_tree(self, command: ParsedCommand) -> OutputLines:
        return render_tree(self.filesystem)

    def _handle_mv(self, command: ParsedCommand) -> OutputLines:
        return self._run_operation(self.filesystem.mv, *command.arguments)


def handle_command(line: str, filesystem: Filesystem) -> OutputLines:
    """
    Convenience function to execute a single command line.

    Params:
        line: The command line to execute
        filesystem: Session state to operate on

    Returns:
        Result lines for the command
    """
    return CommandExecutor(filesystem).execute(line)

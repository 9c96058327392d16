"""
Exception classes for the directory simulator.

This module defines the error taxonomy used by the filesystem model and the
command executor. Recoverable filesystem errors are reported as a single
transcript line, while command faults abort processing of the command stream.

The message of every exception is part of the transcript format, so
``str(exc)`` must stay exactly the documented text.
"""

from dataclasses import dataclass


@dataclass
class FaultContext:
    """
    Location information for a command fault.

    Params:
        line_number: 1-based line number of the command in the input stream
        command_text: The raw command line that caused the fault
    """

    line_number: int | None = None
    command_text: str | None = None

    def format_location(self) -> str:
        """
        Format location information for log and CLI messages.

        Returns:
            Formatted location string, empty when nothing is known
        """
        lines = []
        if self.line_number is not None:
            lines.append(f"  at input line {self.line_number}")
        if self.command_text is not None:
            lines.append(f"  command: {self.command_text!r}")
        return "\n".join(lines)


class DirSimError(Exception):
    """Base exception for all directory simulator errors."""

    pass


class FilesystemError(DirSimError):
    """Base exception for recoverable filesystem operation failures."""

    message = "filesystem operation failed"

    def __init__(self, name: str | None = None):
        """
        Initialize the exception.

        Params:
            name: The directory name or path the operation was given
        """
        self.name = name
        super().__init__(self.message)


class DuplicateNameError(FilesystemError):
    """Raised when a subdirectory with the same name already exists."""

    message = "Subdirectory already exists"


class MoveAboveRootError(FilesystemError):
    """Raised when trying to move up from the root directory."""

    message = "Cannot move up from root directory"


class NotFoundError(FilesystemError):
    """Raised when a referenced subdirectory or path segment does not exist."""

    message = "Subdirectory does not exist"


class CyclicMoveError(FilesystemError):
    """Raised when a directory would be moved below itself."""

    message = "Cannot move directory into itself"


class CommandFault(DirSimError):
    """Base exception for faults that abort processing of the command stream."""

    message = "command fault"

    def __init__(self, command: str | None = None):
        """
        Initialize the exception.

        Params:
            command: The raw command line that caused the fault
        """
        self.command = command
        super().__init__(self.message)


class ArityError(CommandFault):
    """Raised when a command line does not match its argument grammar."""

    message = "command has wrong number of arguments"


class UnknownCommandError(CommandFault):
    """Raised when the command keyword is not recognized."""

    message = "command not known"


class TranscriptAbortedError(DirSimError):
    """Raised when a command fault stops a transcript run."""

    def __init__(
        self,
        fault: CommandFault,
        context: FaultContext,
        partial_output: list[str] | None = None,
    ):
        """
        Initialize the exception.

        Params:
            fault: The command fault that stopped the run
            context: Where in the input the fault happened
            partial_output: Transcript lines produced before the faulting line
        """
        self.fault = fault
        self.context = context
        self.partial_output = list(partial_output or [])

        location_info = context.format_location()
        if location_info:
            full_message = f"{fault}\n{location_info}"
        else:
            full_message = str(fault)
        super().__init__(full_message)

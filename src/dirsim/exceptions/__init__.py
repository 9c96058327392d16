"""
Directory simulator exception classes.

This package provides all exception types used by the filesystem model,
the command parser and the transcript runner.
"""

from dirsim.exceptions.core import (
    ArityError,
    CommandFault,
    CyclicMoveError,
    DirSimError,
    DuplicateNameError,
    FaultContext,
    FilesystemError,
    MoveAboveRootError,
    NotFoundError,
    TranscriptAbortedError,
    UnknownCommandError,
)

__all__ = [
    "DirSimError",
    "FilesystemError",
    "DuplicateNameError",
    "MoveAboveRootError",
    "NotFoundError",
    "CyclicMoveError",
    "CommandFault",
    "ArityError",
    "UnknownCommandError",
    "TranscriptAbortedError",
    "FaultContext",
]

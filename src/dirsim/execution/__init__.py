"""
Command execution for the directory simulator.

This package provides the command executor and the transcript runner that
feeds it a stream of command lines.
"""

from dirsim.execution.executor import CommandExecutor, handle_command
from dirsim.execution.transcript import (
    iter_transcript,
    process_commands,
    read_command_lines,
    run_transcript,
    write_transcript,
)

__all__ = [
    "CommandExecutor",
    "handle_command",
    "iter_transcript",
    "process_commands",
    "read_command_lines",
    "run_transcript",
    "write_transcript",
]

"""
dirsim - A command-driven directory tree simulator

dirsim keeps an in-memory tree of directories, runs line-oriented commands
against it (dir, mkdir, up, cd, tree, mv) and produces a transcript of the
echoed commands and their results.
"""

from importlib.metadata import version

from dirsim.core import Directory, Filesystem
from dirsim.execution import CommandExecutor, process_commands, run_transcript
from dirsim.settings import Settings

__version__ = version("dirsim")

__all__ = [
    "__version__",
    "Directory",
    "Filesystem",
    "CommandExecutor",
    "Settings",
    "process_commands",
    "run_transcript",
]

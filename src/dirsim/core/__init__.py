"""
Core directory simulator components.

This package provides the directory tree model, the filesystem session state
and relative path resolution for moves.
"""

from dirsim.core.filesystem import Filesystem
from dirsim.core.path_utils import MoveTarget, resolve_move_target, split_path
from dirsim.core.tree_node import Directory
from dirsim.core.types import OutputLines

__all__ = [
    "Directory",
    "Filesystem",
    "MoveTarget",
    "resolve_move_target",
    "split_path",
    "OutputLines",
]

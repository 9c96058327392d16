"""Box-drawn tree view of a directory and its descendants."""

from dirsim.core.filesystem import Filesystem
from dirsim.core.tree_node import Directory
from dirsim.core.types import OutputLines

BRANCH = "├── "
LAST_BRANCH = "└── "
CONTINUATION = "│   "
BLANK = "    "


def render_branches(directory: Directory) -> OutputLines:
    """
    Render the subtree below ``directory``, one line per descendant.

    Params:
        directory: Directory whose descendants are drawn

    Returns:
        Lines in depth-first, name-sorted order
    """
    lines: OutputLines = []
    last_index = len(directory.children) - 1
    for index, subdir in enumerate(directory.children):
        is_last = index == last_index
        lines.append((LAST_BRANCH if is_last else BRANCH) + subdir.name)
        prefix = BLANK if is_last else CONTINUATION
        lines.extend(prefix + line for line in render_branches(subdir))
    return lines


def render_tree(filesystem: Filesystem) -> OutputLines:
    """Render the ``tree`` output for the current directory."""
    return [
        f"Tree of {filesystem.current_path()}:",
        ".",
        *render_branches(filesystem.current),
    ]

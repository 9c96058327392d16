"""
Output formatting for the directory simulator.

This package renders directory listings, tree views and the echo records
written to the transcript.
"""

from dirsim.rendering.echo import ECHO_LABEL, render_echo
from dirsim.rendering.listing import NO_SUBDIRECTORIES, pack_names, render_listing
from dirsim.rendering.tree_view import render_branches, render_tree

__all__ = [
    "ECHO_LABEL",
    "NO_SUBDIRECTORIES",
    "pack_names",
    "render_branches",
    "render_echo",
    "render_listing",
    "render_tree",
]

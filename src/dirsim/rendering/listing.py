"""
Column-packed directory listing.

Names are packed greedily into lines. Every entry but the last on a line is
padded to the next column stop, and a line never grows past the line width.
"""

from dirsim.core.filesystem import Filesystem
from dirsim.core.types import OutputLines
from dirsim.settings import Settings

NO_SUBDIRECTORIES = "No subdirectories"


def pack_names(
    names: list[str], column_width: int = 8, line_width: int = 80
) -> OutputLines:
    """
    Pack names into column-aligned lines.

    Params:
        names: Names in display order
        column_width: Column stop; an entry is followed by at least one space
        line_width: Maximum length of a line, unless a single name is longer

    Returns:
        Packed lines without trailing padding, empty if there are no names
    """
    if not names:
        return []

    lines = [names[0]]
    for name in names[1:]:
        line = lines[-1]
        padding = column_width - len(line) % column_width
        if len(line) + padding + len(name) > line_width:
            lines.append(name)
            continue
        lines[-1] = line.ljust(len(line) + padding) + name
    return lines


def render_listing(filesystem: Filesystem, settings: Settings | None = None) -> OutputLines:
    """
    Render the ``dir`` output for the current directory.

    Params:
        filesystem: Filesystem whose current directory is listed
        settings: Layout settings, the filesystem's settings when omitted

    Returns:
        Header line followed by the packed subdirectory names
    """
    settings = settings or filesystem.settings
    header = f"Directory of {filesystem.current_path()}:"
    names = [subdir.name for subdir in filesystem.current.children]
    if not names:
        return [header, NO_SUBDIRECTORIES]
    return [header, *pack_names(names, settings.column_width, settings.line_width)]

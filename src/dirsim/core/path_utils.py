"""
Relative path resolution for the move command.

Move targets are separator-delimited relative paths made of ``.``, ``..`` and
directory names. Resolution walks the tree from the current directory without
changing it; the caller applies the returned target.
"""

from attrs import frozen

from dirsim.core.tree_node import Directory
from dirsim.exceptions import CyclicMoveError, DuplicateNameError, NotFoundError

CURRENT_DIR = "."
PARENT_DIR = ".."


@frozen
class MoveTarget:
    """
    Outcome of resolving a move.

    Params:
        directory: The directory being moved
        destination: The directory that will contain it
        new_name: Name to assign while moving, ``None`` to keep the current one
        is_noop: True when the move leaves the tree as it is
    """

    directory: Directory
    destination: Directory
    new_name: str | None = None
    is_noop: bool = False


def split_path(path: str, separator: str = "\\") -> list[str]:
    """Split a relative path into its tokens, keeping empty tokens."""
    return path.split(separator)


def resolve_move_target(
    container: Directory,
    from_name: str,
    to_path: str,
    separator: str = "\\",
    reject_cycles: bool = False,
) -> MoveTarget:
    """
    Resolve where ``from_name`` ends up when moved to ``to_path``.

    Tokens are applied in order starting from ``container``. A token naming a
    missing directory renames the moved directory when it is the last token,
    and is an error anywhere else.

    Params:
        container: Directory holding the directory to move
        from_name: Name of the direct child of ``container`` to move
        to_path: Relative destination path
        separator: Path separator
        reject_cycles: Refuse destinations inside the moved directory

    Returns:
        MoveTarget describing the move

    Raises:
        NotFoundError: If ``from_name`` or an intermediate segment is missing,
            or ``..`` leaves the root
        DuplicateNameError: If the destination already holds a directory with
            the moved directory's name
        CyclicMoveError: If ``reject_cycles`` is set and the destination is
            the moved directory or one of its descendants
    """
    directory = container.child(from_name)
    if directory is None:
        raise NotFoundError(from_name)

    steps = split_path(to_path, separator)
    destination = container

    for index, step in enumerate(steps):
        if step == CURRENT_DIR:
            continue
        if step == PARENT_DIR:
            parent = destination.parent
            if parent is None:
                raise NotFoundError(to_path)
            destination = parent
            continue

        subdir = destination.child(step)
        if subdir is not None:
            destination = subdir
            continue

        if index == len(steps) - 1:
            if reject_cycles and _lands_inside(directory, destination):
                raise CyclicMoveError(to_path)
            return MoveTarget(directory, destination, new_name=step)
        raise NotFoundError(to_path)

    # Same place under the same name
    if destination is directory or destination is container:
        return MoveTarget(directory, destination, is_noop=True)

    if reject_cycles and _lands_inside(directory, destination):
        raise CyclicMoveError(to_path)

    existing = destination.child(directory.name)
    if existing is not None and existing is not directory:
        raise DuplicateNameError(directory.name)

    return MoveTarget(directory, destination)


def _lands_inside(directory: Directory, destination: Directory) -> bool:
    return destination is directory or directory.is_ancestor_of(destination)

"""
Session state of the simulated filesystem.

A Filesystem holds the root directory and the current directory cursor.
Every operation works relative to the current directory and either succeeds
or raises a FilesystemError without changing any state.
"""

from dirsim.core.path_utils import resolve_move_target
from dirsim.core.tree_node import Directory
from dirsim.exceptions import DuplicateNameError, MoveAboveRootError, NotFoundError
from dirsim.settings import DEFAULT_SETTINGS, Settings


class Filesystem:
    """
    In-memory directory tree with a current directory.

    Params:
        settings: Settings providing the root name, separator and move policy
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.root = Directory(self.settings.root_name)
        self.current = self.root

    def add_subdir(self, name: str) -> Directory:
        """
        Create a subdirectory of the current directory.

        Params:
            name: Name of the new subdirectory

        Returns:
            The created directory

        Raises:
            DuplicateNameError: If the current directory already has a child
                with this name
        """
        if self.current.child(name) is not None:
            raise DuplicateNameError(name)
        subdir = Directory(name)
        self.current.attach(subdir)
        return subdir

    def up(self) -> Directory:
        """Move the current directory to its parent."""
        if self.current.is_root:
            raise MoveAboveRootError(self.current.name)
        self.current = self.current.parent
        return self.current

    def cd(self, name: str) -> Directory:
        """
        Change the current directory to one of its direct children.

        Only a single directory name is accepted, not a path.

        Raises:
            NotFoundError: If no direct child has this name
        """
        subdir = self.current.child(name)
        if subdir is None:
            raise NotFoundError(name)
        self.current = subdir
        return subdir

    def mv(self, from_name: str, to_path: str) -> Directory:
        """
        Move and/or rename a direct child of the current directory.

        Params:
            from_name: Name of the child to move
            to_path: Relative destination path, see ``resolve_move_target``

        Returns:
            The moved directory

        Raises:
            NotFoundError: If the source or part of the path does not exist
            DuplicateNameError: If the destination already has that name
            CyclicMoveError: If cyclic moves are rejected and this is one
        """
        target = resolve_move_target(
            self.current,
            from_name,
            to_path,
            separator=self.settings.separator,
            reject_cycles=self.settings.reject_cyclic_moves,
        )
        directory = target.directory
        if target.is_noop:
            return directory

        if target.new_name is not None:
            directory.name = target.new_name
        directory.parent.detach(directory)
        target.destination.attach(directory)
        return directory

    def current_path(self) -> str:
        """Path from the root to the current directory."""
        return self.settings.separator.join(self.current.path_parts())

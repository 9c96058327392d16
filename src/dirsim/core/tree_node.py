"""
Directory node for the simulated filesystem tree.

A directory owns its children. The link back to the parent is a weak
reference, so a node never keeps its container alive.
"""

import weakref
from dataclasses import dataclass, field


@dataclass(eq=False)
class Directory:
    """
    A named node in the directory tree.

    Nodes compare by identity. ``children`` is kept sorted by name after every
    structural change made through this class.

    Params:
        name: Directory name, unique among its siblings
        children: Subdirectories, sorted ascending by name
    """

    name: str
    children: list["Directory"] = field(default_factory=list, repr=False)
    _parent_ref: "weakref.ReferenceType[Directory] | None" = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> "Directory | None":
        """The containing directory, ``None`` for the root or a detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: "Directory | None") -> None:
        self._parent_ref = None if value is None else weakref.ref(value)

    @property
    def is_root(self) -> bool:
        """True for a directory without a parent."""
        return self.parent is None

    def child(self, name: str) -> "Directory | None":
        """Return the direct child called ``name``, or ``None``."""
        for subdir in self.children:
            if subdir.name == name:
                return subdir
        return None

    def attach(self, subdir: "Directory") -> None:
        """Insert ``subdir`` as a child and restore name order."""
        subdir.parent = self
        self.children.append(subdir)
        self.sort_children()

    def detach(self, subdir: "Directory") -> None:
        """Remove ``subdir`` from the children, matching by identity."""
        self.children = [child for child in self.children if child is not subdir]

    def sort_children(self) -> None:
        self.children.sort(key=lambda subdir: subdir.name)

    def is_ancestor_of(self, other: "Directory") -> bool:
        """Check whether this node is a proper ancestor of ``other``."""
        seen = set()
        node = other.parent
        while node is not None and id(node) not in seen:
            if node is self:
                return True
            seen.add(id(node))
            node = node.parent
        return False

    def path_parts(self) -> list[str]:
        """
        Names from the topmost reachable ancestor down to this node.

        Returns:
            List of names, this node's name last
        """
        parts = [self.name]
        seen = {id(self)}
        node = self.parent
        while node is not None and id(node) not in seen:
            parts.append(node.name)
            seen.add(id(node))
            node = node.parent
        parts.reverse()
        return parts

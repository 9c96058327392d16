"""
Tests for the box-drawn tree view.
"""

from dirsim.core import Directory
from dirsim.rendering import render_branches, render_tree


def _descend(fs, *names):
    for name in names:
        fs.cd(name)


class TestRenderTree:
    """Test the tree output."""

    def test_root_with_no_subdirs(self, filesystem):
        """An empty root renders just the header and the dot."""
        assert render_tree(filesystem) == ["Tree of root:", "."]

    def test_single_chain(self, make_filesystem):
        """Last children use the corner and blank continuation."""
        fs = make_filesystem("sub1")
        _descend(fs, "sub1")
        fs.add_subdir("sub3")
        _descend(fs, "sub3")
        fs.add_subdir("sub4")
        fs.current = fs.root

        assert render_tree(fs) == [
            "Tree of root:",
            ".",
            "└── sub1",
            "    └── sub3",
            "        └── sub4",
        ]

    def test_continuation_bar_for_non_last_branch(self, make_filesystem):
        """Descendants of a non-last child get a continuation bar."""
        fs = make_filesystem("sub1", "sub2")
        _descend(fs, "sub1")
        fs.add_subdir("sub3")
        _descend(fs, "sub3")
        fs.add_subdir("sub4")
        fs.current = fs.root

        assert render_tree(fs) == [
            "Tree of root:",
            ".",
            "├── sub1",
            "│   └── sub3",
            "│       └── sub4",
            "└── sub2",
        ]

    def test_siblings_at_depth(self, make_filesystem):
        """Siblings below blank continuations use tee and corner."""
        fs = make_filesystem("sub1")
        _descend(fs, "sub1")
        fs.add_subdir("sub3")
        _descend(fs, "sub3")
        fs.add_subdir("sub4")
        fs.add_subdir("sub5")
        fs.current = fs.root

        assert render_tree(fs) == [
            "Tree of root:",
            ".",
            "└── sub1",
            "    └── sub3",
            "        ├── sub4",
            "        └── sub5",
        ]

    def test_complicated_levels(self, make_filesystem):
        """Bars and blanks combine across several levels."""
        fs = make_filesystem("sub1", "sub2")
        _descend(fs, "sub1")
        fs.add_subdir("sub3")
        fs.add_subdir("sub4")
        _descend(fs, "sub3")
        fs.add_subdir("sub4")
        fs.current = fs.root

        assert render_tree(fs) == [
            "Tree of root:",
            ".",
            "├── sub1",
            "│   ├── sub3",
            "│   │   └── sub4",
            "│   └── sub4",
            "└── sub2",
        ]

    def test_subdir_with_no_subdirs(self, make_filesystem):
        """The header names the current directory path."""
        fs = make_filesystem("sub1", "sub2")
        _descend(fs, "sub1")

        assert render_tree(fs) == ["Tree of root\\sub1:", "."]

    def test_tree_of_subdirectory_only_shows_its_descendants(self, make_filesystem):
        """Only the current directory's subtree is drawn."""
        fs = make_filesystem("sub1", "sub2")
        _descend(fs, "sub1")
        fs.add_subdir("inner")

        assert render_tree(fs) == ["Tree of root\\sub1:", ".", "└── inner"]


class TestRenderBranches:
    """Test branch rendering on bare directories."""

    def test_leaf(self):
        """A directory without children renders no branches."""
        assert render_branches(Directory("leaf")) == []

    def test_order_follows_children(self):
        """Branches follow the sorted child order."""
        root = Directory("root")
        for name in ["b", "a"]:
            root.attach(Directory(name))

        assert render_branches(root) == ["├── a", "└── b"]

"""Node representation for file system elements in the tree."""

from typing import Any, Iterable, Optional

from anytree import Node, TreeError


class FileSystemNode(Node):  # type: ignore
    """Base node class representing an entry in the filesystem tree.

    Extends anytree.Node, inheriting its traversal capabilities. A tree is made of
    exactly two kinds of node, FileNode and DirectoryNode, distinguished by the
    class-level `is_dir` flag. Trees are assembled bottom-up: children are created
    first and handed to their parent through the `children` argument.

    Attributes:
        name (str): The final path component of the entry (never a full path).
        is_dir (bool): True for directories, False for every other entry.
        children (tuple[FileSystemNode]): The child nodes, in insertion order.

    Example:
        >>> root = DirectoryNode("root", children=[FileNode("a.txt"), DirectoryNode("sub")])
        >>> [child.name for child in root.children]
        ['a.txt', 'sub']
        >>> root.children[1].is_dir
        True
    """

    is_dir = False

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        children: Optional[Iterable["FileSystemNode"]] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory. Must not be empty.
            parent: The parent node. Defaults to None.
            children: Child nodes to adopt. Defaults to None.
            **kwargs: Additional attributes passed to anytree.Node.

        Raises:
            ValueError: If name is empty.
            anytree.TreeError: If children are given to a node that is not a directory.
        """
        if not name:
            raise ValueError("Node name must not be empty")
        super().__init__(name, parent=parent, children=children, **kwargs)

    def _pre_attach(self, parent: "FileSystemNode") -> None:
        if not parent.is_dir:
            raise TreeError(f"Cannot attach {self.name!r} below non-directory {parent.name!r}")


class FileNode(FileSystemNode):
    """A leaf: a regular file, device, symlink or any other non-directory entry."""

    is_dir = False


class DirectoryNode(FileSystemNode):
    """A directory with zero or more children.

    A directory without children is either empty on disk or was not expanded
    because of a depth limit; the two cases are not distinguished.
    """

    is_dir = True

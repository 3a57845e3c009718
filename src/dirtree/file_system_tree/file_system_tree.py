"""File system tree representation with configurable filtering.

This module provides the FileSystemTree class, which ties the tree builder and
the tree renderer together behind a lazily built, cached tree.
"""

from pathlib import Path
from typing import Iterator, Optional

from anytree import LevelOrderIter

from dirtree.config import FilterConfig, RenderConfig
from dirtree.file_system_tree.file_system_node import DirectoryNode
from dirtree.file_system_tree.tree_builder import build_tree
from dirtree.file_system_tree.tree_renderer import render_tree
from dirtree.types import PathType


class FileSystemTree:
    """A tree representation of a directory structure.

    The tree is built on first access and cached; refresh() rebuilds it to reflect
    filesystem changes. Entries are filtered according to the FilterConfig given
    at construction time.

    Symbolic Link Behavior:
        Symbolic links are never followed. A symlink, whatever it points to, is a
        leaf of the tree, so symlink loops cannot occur.

    Error Handling:
        Any failure to read the filesystem raises TreeBuildError from the accessor
        that triggered the build. No partial tree is kept.

    Attributes:
        root_path (Path): The root directory, as given.
        filter_config (FilterConfig): Traversal policy.

    Example:
        >>> tree = FileSystemTree(".")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        .
        ├───file1.txt
        └───subdir
            └───file2.txt
    """

    def __init__(self, root_path: PathType, filter_config: Optional[FilterConfig] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
            filter_config: Traversal policy. Defaults to FilterConfig().
        """
        self.root_path = Path(root_path)
        self.filter_config = filter_config if filter_config is not None else FilterConfig()
        self._tree: Optional[DirectoryNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> DirectoryNode:
        """Get the root node of the filesystem tree, building it if needed.

        Raises:
            TreeBuildError: If the filesystem cannot be read.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> DirectoryNode:
        tree = build_tree(self.root_path, self.filter_config)

        file_count = 0
        directory_count = 0
        # Breadth-first, so counting does not recurse once per level
        for node in LevelOrderIter(tree):
            if node.is_dir:
                directory_count += 1
            else:
                file_count += 1

        self._file_count = file_count
        self._directory_count = directory_count - 1  # the root is not counted
        return tree

    def get_file_count(self) -> int:
        """Get the number of non-directory entries in the tree.

        Example:
            >>> FileSystemTree("src").get_file_count()  # doctest: +SKIP
            12
        """
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def stream_tree_representation(self, render_config: Optional[RenderConfig] = None) -> Iterator[str]:
        """Generate the tree diagram one line at a time.

        The whole tree is built before the first line is produced.

        Args:
            render_config: Rendering options. Defaults to RenderConfig().

        Yields:
            Lines of the diagram, without trailing newlines.
        """
        yield from render_tree(self.get_tree(), render_config)

    def get_tree_representation(self, render_config: Optional[RenderConfig] = None) -> str:
        """Get the complete tree diagram as a string."""
        return "\n".join(self.stream_tree_representation(render_config))

    def refresh(self) -> None:
        """Discard the cached tree and counts, then rebuild from the filesystem."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self._tree = self._build_tree()

"""Depth-first construction of a filesystem tree.

The builder walks the directory hierarchy depth-first and returns a fully
materialized tree of FileNode and DirectoryNode values. Any failure to read the
filesystem aborts the build; a partial tree is never returned.
"""

import os
from typing import Iterator, List, Optional

from dirtree.config import FilterConfig
from dirtree.exceptions import TreeBuildError
from dirtree.file_system_tree.file_system_node import DirectoryNode, FileNode, FileSystemNode
from dirtree.types import DirectoryEntry, PathType

HIDDEN_PREFIX = "."


def build_tree(root_path: PathType, config: Optional[FilterConfig] = None) -> DirectoryNode:
    """Build the tree rooted at root_path.

    The root is always a directory node named by the path exactly as given, e.g.
    "." for the current directory, whatever the depth limit.

    Args:
        root_path: The directory to walk.
        config: Traversal policy. Defaults to FilterConfig().

    Returns:
        The root DirectoryNode.

    Raises:
        TreeBuildError: If the root or any directory below it cannot be listed, or
            an entry's type cannot be determined.

    Example:
        >>> root = build_tree("src", FilterConfig(max_depth=1))  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['dirtree']
    """
    if config is None:
        config = FilterConfig()

    path = os.fspath(root_path)
    if config.max_depth == 0:
        # Still fail on an unreadable root, but do not read any of its entries
        _open_directory(path)
        return DirectoryNode(path)

    return DirectoryNode(path, children=_build_children(path, config))


def list_directory(path: str, sort_by_name: bool = False) -> List[DirectoryEntry]:
    """List the entries of a directory without following symlinks.

    The listing is read completely, and the directory handle closed, before
    returning.

    Args:
        path: Directory to list.
        sort_by_name: Sort entries by name instead of keeping the platform order.

    Returns:
        The entries of the directory.

    Raises:
        TreeBuildError: If the directory cannot be opened or read, or the type of
            one of its entries cannot be determined.
    """
    try:
        with os.scandir(path) as it:
            entries = [DirectoryEntry(entry.name, entry.is_dir(follow_symlinks=False), entry.path) for entry in it]
    except OSError as e:
        raise TreeBuildError(path, e) from e

    if sort_by_name:
        entries.sort(key=lambda entry: entry.name)
    return entries


def _open_directory(path: str) -> None:
    try:
        with os.scandir(path):
            pass
    except OSError as e:
        raise TreeBuildError(path, e) from e


class _PendingDirectory:
    """A directory whose entries are still being turned into nodes."""

    def __init__(self, name: str, relative_path: str, depth: int, entries: List[DirectoryEntry]) -> None:
        self.name = name
        self.relative_path = relative_path
        self.depth = depth
        self.entries: Iterator[DirectoryEntry] = iter(entries)
        self.children: List[FileSystemNode] = []


def _build_children(path: str, config: FilterConfig) -> List[FileSystemNode]:
    """Build the child nodes of the root directory at path.

    The walk is depth-first with an explicit stack, so nesting depth is not bounded
    by the interpreter's recursion limit. A directory node is created only once all
    of its own children exist, then attached to the directory below it on the stack.

    Args:
        path: The root directory.
        config: Traversal policy.
    """
    root = _PendingDirectory(path, "", 1, list_directory(path, config.sort_by_name))
    stack = [root]

    while stack:
        current = stack[-1]
        entry = next(current.entries, None)

        if entry is None:
            stack.pop()
            if stack:
                stack[-1].children.append(DirectoryNode(current.name, children=current.children))
            continue

        relative_path = f"{current.relative_path}/{entry.name}" if current.relative_path else entry.name
        if _is_filtered(entry, relative_path, config):
            continue

        if not entry.is_dir:
            current.children.append(FileNode(entry.name))
        elif config.max_depth is None or current.depth + 1 <= config.max_depth:
            entries = list_directory(entry.path, config.sort_by_name)
            stack.append(_PendingDirectory(entry.name, relative_path, current.depth + 1, entries))
        else:
            # Depth-capped: shown, but never opened
            current.children.append(DirectoryNode(entry.name))

    return root.children


def _is_filtered(entry: DirectoryEntry, relative_path: str, config: FilterConfig) -> bool:
    if not config.include_hidden and entry.name.startswith(HIDDEN_PREFIX):
        return True
    if config.exclusion_rules is not None:
        return config.exclusion_rules.excludes_entry(relative_path, entry.is_dir)
    return False

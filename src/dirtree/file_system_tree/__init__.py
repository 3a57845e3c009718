"""File system tree building and rendering.

This package provides the node types of a directory tree, the builder that walks
the filesystem into such a tree, and the renderer that draws it as text.
"""

from .file_system_node import DirectoryNode, FileNode, FileSystemNode
from .file_system_tree import FileSystemTree
from .tree_builder import build_tree
from .tree_renderer import render_tree

__all__ = [
    "DirectoryNode",
    "FileNode",
    "FileSystemNode",
    "FileSystemTree",
    "build_tree",
    "render_tree",
]

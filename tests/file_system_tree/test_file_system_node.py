"""Unit tests for the FileSystemNode classes."""

import pytest
from anytree import PreOrderIter, TreeError

from dirtree.file_system_tree.file_system_node import DirectoryNode, FileNode, FileSystemNode


def test_file_node_initialization():
    node = FileNode("test_file.txt")
    assert node.name == "test_file.txt"
    assert not node.is_dir
    assert node.children == ()
    assert node.parent is None


def test_directory_node_initialization():
    node = DirectoryNode("test_dir")
    assert node.name == "test_dir"
    assert node.is_dir
    assert node.children == ()


def test_nodes_share_base_class():
    assert isinstance(FileNode("a"), FileSystemNode)
    assert isinstance(DirectoryNode("b"), FileSystemNode)


def test_bottom_up_construction_keeps_order():
    """Children passed to the constructor keep their order and point back to the parent."""
    leaf = FileNode("leaf.txt")
    sub = DirectoryNode("sub", children=[leaf])
    first = FileNode("z_first")
    root = DirectoryNode("root", children=[first, sub, FileNode("a_last")])

    assert [child.name for child in root.children] == ["z_first", "sub", "a_last"]
    assert sub.parent is root
    assert leaf.parent is sub
    assert [node.name for node in PreOrderIter(root)] == ["root", "z_first", "sub", "leaf.txt", "a_last"]


@pytest.mark.parametrize("node_class", [FileNode, DirectoryNode])
def test_empty_name_rejected(node_class):
    with pytest.raises(ValueError):
        node_class("")


def test_file_node_cannot_have_children():
    with pytest.raises(TreeError):
        FileNode("file.txt", children=[FileNode("child")])


def test_file_node_cannot_be_parent():
    parent = FileNode("file.txt")
    with pytest.raises(TreeError):
        FileNode("child", parent=parent)
    assert parent.children == ()


def test_file_system_node_with_additional_attributes():
    node = FileNode("test_file.txt", size=1024)
    assert node.size == 1024

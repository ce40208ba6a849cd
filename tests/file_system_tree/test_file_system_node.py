"""Unit tests for the FileSystemNode class."""

from pathlib import Path

from anytree import PreOrderIter

from icontree.file_system_tree.file_entry import Classification, FileEntry, SymlinkTarget
from icontree.file_system_tree.file_system_node import FileSystemNode
from icontree.types import FileType


def make_entry(path, file_type=FileType.FILE, **kwargs):
    return FileEntry(Path(path), Path(path).name, Classification(file_type, **kwargs))


def test_node_takes_name_from_entry():
    entry = make_entry("src/main.py")
    node = FileSystemNode(entry)

    assert node.name == "main.py"
    assert node.entry is entry
    assert not node.is_dir
    assert not node.is_symlink
    assert not node.truncated


def test_node_flags():
    directory = FileSystemNode(make_entry("src", FileType.DIRECTORY), truncated=True)
    link = FileSystemNode(make_entry("src/link", FileType.SYMLINK, symlink=SymlinkTarget("main.py")))

    assert directory.is_dir
    assert directory.truncated
    assert link.is_symlink
    assert not link.is_dir


def test_parent_child_order():
    root = FileSystemNode(make_entry("root", FileType.DIRECTORY))
    child1 = FileSystemNode(make_entry("root/a", FileType.DIRECTORY), parent=root)
    child2 = FileSystemNode(make_entry("root/b.txt"), parent=root)
    grandchild = FileSystemNode(make_entry("root/a/c.txt"), parent=child1)

    assert child1.parent is root
    assert grandchild.parent is child1
    assert root.children == (child1, child2)
    assert [node.name for node in PreOrderIter(root)] == ["root", "a", "c.txt", "b.txt"]

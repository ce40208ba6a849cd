"""Node representation of rendered entries."""

from typing import Any, Optional

from anytree import Node

from icontree.file_system_tree.file_entry import FileEntry


class FileSystemNode(Node):  # type: ignore
    """Node of the in-memory model of a rendered tree.

    Extends anytree.Node with the classified entry it stands for, so callers
    can use anytree's iterators, searches and renderers on exactly what the
    text tree shows. Children appear in display order.

    Attributes:
        name (str): The entry's display name (its base name).
        entry (FileEntry): The classified entry.
        truncated (bool): True if overview mode hid some of this node's children.

    Example:
        >>> from pathlib import Path
        >>> from icontree.file_system_tree.file_entry import Classification
        >>> from icontree.types import FileType
        >>> root = FileSystemNode(FileEntry(Path("src"), "src", Classification(FileType.DIRECTORY)))
        >>> child = FileSystemNode(
        ...     FileEntry(Path("src/a.py"), "a.py", Classification(FileType.FILE)), parent=root
        ... )
        >>> [node.name for node in root.children]
        ['a.py']
        >>> root.is_dir, child.is_dir
        (True, False)
    """

    def __init__(
        self,
        entry: FileEntry,
        parent: Optional["FileSystemNode"] = None,
        truncated: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(entry.name, parent, **kwargs)
        self.entry = entry
        self.truncated = truncated

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir

    @property
    def is_symlink(self) -> bool:
        return self.entry.is_symlink

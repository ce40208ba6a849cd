"""Device/inode identity of directories, used to stop symlink loops."""

import os
from typing import Any, Optional

from icontree.types import PathType


class FileIdentifier:
    """Identifies a directory by device ID and inode number.

    When symlinks to directories are followed, the renderer keeps the
    identifiers of the directories on the current branch. A link that resolves
    to one of them would recurse forever, so it is shown but not expanded.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def from_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Build the identifier of whatever ``path`` resolves to.

        Returns:
            The identifier, or None if the path cannot be stat'ed.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"

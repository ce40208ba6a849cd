from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of the kinds of filesystem entries the classifier can report.

    Every entry encountered during a walk maps to exactly one member, decided
    from the entry's own metadata (a symlink is a SYMLINK, never its target).

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        BLOCK_DEVICE: Block special device
        CHAR_DEVICE: Character special device
        PIPE: Named pipe (FIFO)
        SOCKET: Unix domain socket
        SPECIAL: Anything the platform reports that fits none of the above
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    PIPE = "pipe"
    SOCKET = "socket"
    SPECIAL = "special"

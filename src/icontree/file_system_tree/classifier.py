"""Classification of filesystem entries from their OS metadata."""

import os
import stat
from pathlib import Path

from icontree.exceptions import EncodingFailureError
from icontree.file_system_tree.file_entry import Classification, FileEntry, SymlinkTarget
from icontree.types import FileType, PathType

# Any one of these bits marks a regular file as executable
EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _as_text(value: str) -> str:
    # Undecodable bytes from the OS arrive as lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise EncodingFailureError(value) from None
    return value


def _probe_symlink(path: Path) -> SymlinkTarget:
    """Read a link and follow it once to see what it points at.

    A dangling or unreadable target is not an error, it is reported through
    ``exists=False``.
    """
    target = _as_text(os.readlink(path))
    try:
        target_stat = os.stat(path)
    except OSError:
        return SymlinkTarget(target, is_dir=False, exists=False)
    return SymlinkTarget(target, is_dir=stat.S_ISDIR(target_stat.st_mode), exists=True)


def classify(path: PathType) -> FileEntry:
    """Classify a filesystem entry without following it if it is a symlink.

    Args:
        path: Path of the entry. Its base name becomes the display label; paths
            without one (``/``, ``.``) use the whole path instead.

    Returns:
        The classified entry.

    Raises:
        OSError: If the entry's metadata cannot be read, for example because
            permission is denied or the entry vanished.
        EncodingFailureError: If the path or the symlink target is not valid
            UTF-8 text.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     classify(tmp).file_type
        <FileType.DIRECTORY: 'directory'>
    """
    # Spelled as given, since pathlib normalizes away a leading "."
    text = os.fspath(path)
    path = Path(path)
    mode = os.lstat(path).st_mode
    text = _as_text(text)
    name = path.name or text

    if stat.S_ISREG(mode):
        classification = Classification(FileType.FILE, executable=bool(mode & EXECUTE_BITS))
    elif stat.S_ISDIR(mode):
        classification = Classification(FileType.DIRECTORY)
    elif stat.S_ISLNK(mode):
        classification = Classification(FileType.SYMLINK, symlink=_probe_symlink(path))
    elif stat.S_ISBLK(mode):
        classification = Classification(FileType.BLOCK_DEVICE)
    elif stat.S_ISCHR(mode):
        classification = Classification(FileType.CHAR_DEVICE)
    elif stat.S_ISFIFO(mode):
        classification = Classification(FileType.PIPE)
    elif stat.S_ISSOCK(mode):
        classification = Classification(FileType.SOCKET)
    else:
        classification = Classification(FileType.SPECIAL)

    return FileEntry(path, name, classification, display_path=text)

"""Classified filesystem entries and their one-line display form."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from icontree.colors import colorize
from icontree.icons import resolve_icon
from icontree.types import FileType

SYMLINK_ARROW = "⇒"


@dataclass(frozen=True)
class SymlinkTarget:
    """Where a symbolic link points, as observed when it was classified.

    Attributes:
        target: The link contents exactly as stored, relative or absolute.
        is_dir: True if following the link reaches a directory.
        exists: False for dangling links or targets that could not be probed.
    """

    target: str
    is_dir: bool = False
    exists: bool = False


@dataclass(frozen=True)
class Classification:
    """The type of an entry together with its type-specific payload.

    Only regular files carry ``executable`` and only symlinks carry ``symlink``;
    any other combination is rejected, which keeps the set of variants closed.

    Example:
        >>> Classification(FileType.FILE, executable=True).executable
        True
        >>> Classification(FileType.DIRECTORY, executable=True)
        Traceback (most recent call last):
        ...
        ValueError: Only regular files can be executable, got directory
    """

    file_type: FileType
    executable: bool = False
    symlink: Optional[SymlinkTarget] = None

    def __post_init__(self) -> None:
        if self.executable and self.file_type is not FileType.FILE:
            raise ValueError(f"Only regular files can be executable, got {self.file_type.value}")
        if (self.file_type is FileType.SYMLINK) != (self.symlink is not None):
            raise ValueError("A symlink target is required for symlinks and forbidden otherwise")


@dataclass(frozen=True)
class FileEntry:
    """A single filesystem object encountered during a walk.

    Attributes:
        path: The path the entry was classified from.
        name: The base name, or the whole path when it has no base name.
        classification: What the entry is.
        display_path: The path as spelled when it was classified, used as the
            full-path label. pathlib drops a leading ``./`` that this keeps.
            Defaults to ``str(path)``.
    """

    path: Path
    name: str
    classification: Classification
    display_path: Optional[str] = None

    @property
    def file_type(self) -> FileType:
        return self.classification.file_type

    @property
    def is_dir(self) -> bool:
        return self.classification.file_type is FileType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.classification.file_type is FileType.SYMLINK

    @property
    def icon(self) -> str:
        link = self.classification.symlink
        return resolve_icon(
            self.name,
            self.file_type,
            executable=self.classification.executable,
            points_to_dir=link is not None and link.is_dir,
        )

    def render(self, full_path: bool = False, icons: bool = True, color_level: Optional[int] = None) -> str:
        """Format the entry as ``"<icon> <label>"``.

        Args:
            full_path: Use the entry's full path as the label instead of its name.
                The icon is still resolved from the base name.
            icons: Prefix the label with the resolved icon glyph.
            color_level: Nesting level used to pick a label colour, or None for
                plain text.

        Returns:
            The display string. Symlinks get ``" ⇒ <target>"`` appended whether
            or not the target exists.

        Example:
            >>> entry = FileEntry(
            ...     Path("docs/link"), "link",
            ...     Classification(FileType.SYMLINK, symlink=SymlinkTarget("target.txt")),
            ... )
            >>> entry.render(icons=False)
            'link ⇒ target.txt'
            >>> entry.render(full_path=True, icons=False)
            'docs/link ⇒ target.txt'
        """
        if full_path:
            label = self.display_path if self.display_path is not None else str(self.path)
        else:
            label = self.name
        if color_level is not None:
            label = colorize(label, color_level)
        text = f"{self.icon} {label}" if icons else label

        link = self.classification.symlink
        if link is not None:
            text = f"{text} {SYMLINK_ARROW} {link.target}"
        return text

    def __str__(self) -> str:
        return self.render()

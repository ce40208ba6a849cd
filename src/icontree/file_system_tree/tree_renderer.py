"""Recursive rendering of a directory as an icon-annotated text tree.

This module walks a directory depth-first and produces the lines of a tree in
the style of the Unix ``tree`` command, followed by a summary line with the
number of directories and files shown. The walk is a generator, so output can
be streamed and stopped at any point.
"""

import os
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, TextIO, Union

from icontree.config import OVERVIEW_LIMIT, RenderConfig
from icontree.exceptions import EncodingFailureError
from icontree.file_system_tree.classifier import classify
from icontree.file_system_tree.file_entry import FileEntry
from icontree.file_system_tree.file_identifier import FileIdentifier
from icontree.file_system_tree.file_system_node import FileSystemNode
from icontree.file_system_tree.permission_action import PermissionAction

BRANCH = "├──"
LAST_BRANCH = "└──"
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "
PLACEHOLDER = "..."


@dataclass
class RunSummary:
    """Counters accumulated over one walk.

    Attributes:
        directories: Directories shown, the root excluded.
        files: Non-directory entries shown.
        skipped: One message per entry or directory skipped because it could not
            be read, in walk order. Only filled under PermissionAction.IGNORE.
    """

    directories: int = 0
    files: int = 0
    skipped: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.directories} directories and {self.files} files"


@dataclass(frozen=True)
class TreeLine:
    """One line of the tree before it is formatted.

    Attributes:
        prefix: Accumulated indentation drawn from the ancestors' positions.
        level: Nesting level, 0 for the root line and 1 for its children.
        is_last: Whether the entry is the last of its siblings.
        entry: The entry shown, or None for the overview placeholder.
        is_root: Whether this is the root line.
    """

    prefix: str
    level: int
    is_last: bool
    entry: Optional[FileEntry]
    is_root: bool = False


class TreeRenderer:
    """Renders a directory tree according to a RenderConfig.

    Each call to ``walk`` (and therefore ``stream_tree``, ``get_tree`` and
    ``get_tree_representation``) performs a fresh walk of the filesystem and
    resets ``summary``.

    Error Handling:
        Entries that cannot be classified and directories that cannot be listed
        are handled according to ``config.permission_action``:
        - IGNORE (default): the entry is skipped, or the directory is shown without
          children, and a message is added to ``summary.skipped``
        - RAISE: the error propagates and the walk stops; lines already produced
          remain valid partial output

    Attributes:
        config (RenderConfig): The configuration of this renderer.
        summary (RunSummary): Counters of the most recent (or current) walk.

    Example:
        >>> renderer = TreeRenderer(RenderConfig("src", no_icons=True, no_color=True))  # doctest: +SKIP
        >>> print(renderer.get_tree_representation())  # doctest: +SKIP
        src
        ├── main.py
        └── utils
            └── helpers.py
        1 directories and 2 files
    """

    def __init__(self, config: RenderConfig) -> None:
        self.config = config
        self.summary = RunSummary()

    def walk(self) -> Iterator[TreeLine]:
        """Walk the tree and yield its lines in pre-order, siblings sorted by name.

        Yields:
            The root line first, then one line per shown entry and one per overview
            placeholder.

        Raises:
            OSError: If the root cannot be read, or any entry cannot be read under
                PermissionAction.RAISE.
            EncodingFailureError: If the root path is not valid text, or any entry
                name is not valid text under PermissionAction.RAISE.
        """
        self.summary = RunSummary()
        root = classify(self.config.root)
        yield TreeLine(prefix="", level=0, is_last=True, entry=root, is_root=True)

        ancestors: Set[FileIdentifier] = set()
        if self.config.follow_symlinks:
            root_id = FileIdentifier.from_path(root.path)
            if root_id is not None:
                ancestors.add(root_id)

        yield from self._walk_directory(self._display_path(root), 0, "", ancestors)

    def _walk_directory(
        self, directory: str, depth: int, prefix: str, ancestors: Set[FileIdentifier]
    ) -> Iterator[TreeLine]:
        if depth > self.config.max_depth:
            return

        children = self._list_children(directory)
        shown = children
        truncated = self.config.overview and len(children) > OVERVIEW_LIMIT
        if truncated:
            shown = children[:OVERVIEW_LIMIT]

        last_index = len(children) - 1
        for index, entry in enumerate(shown):
            is_last = index == last_index
            yield TreeLine(prefix=prefix, level=depth + 1, is_last=is_last, entry=entry)

            if self._is_directory(entry):
                self.summary.directories += 1
                child_prefix = prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX)
                yield from self._descend(entry, depth + 1, child_prefix, ancestors)
            else:
                self.summary.files += 1

        if truncated:
            yield TreeLine(prefix=prefix, level=depth + 1, is_last=True, entry=None)

    def _descend(
        self, entry: FileEntry, depth: int, prefix: str, ancestors: Set[FileIdentifier]
    ) -> Iterator[TreeLine]:
        directory = self._display_path(entry)
        if not self.config.follow_symlinks:
            yield from self._walk_directory(directory, depth, prefix, ancestors)
            return

        # Only the current branch is tracked, so the same directory reached
        # through unrelated paths is still expanded each time
        file_id = FileIdentifier.from_path(entry.path)
        if file_id is None:
            yield from self._walk_directory(directory, depth, prefix, ancestors)
        elif file_id not in ancestors:
            yield from self._walk_directory(directory, depth, prefix, ancestors | {file_id})

    def _list_children(self, directory: str) -> List[FileEntry]:
        """List, classify, filter and sort the entries of a directory."""
        try:
            names = os.listdir(directory)
        except OSError as e:
            self._handle_error(e)
            return []

        children: List[FileEntry] = []
        for name in names:
            if not self.config.include_hidden and name.startswith("."):
                continue
            try:
                entry = classify(os.path.join(directory, name))
            except (OSError, EncodingFailureError) as e:
                self._handle_error(e)
                continue
            if self.config.directories_only and not self._is_directory(entry):
                continue
            if self._is_excluded(entry):
                continue
            children.append(entry)

        children.sort(key=lambda child: child.name)
        return children

    @staticmethod
    def _display_path(entry: FileEntry) -> str:
        return entry.display_path if entry.display_path is not None else str(entry.path)

    def _is_directory(self, entry: FileEntry) -> bool:
        if entry.is_dir:
            return True
        link = entry.classification.symlink
        return self.config.follow_symlinks and link is not None and link.is_dir

    def _is_excluded(self, entry: FileEntry) -> bool:
        rules = self.config.exclusion_rules
        if rules is None:
            return False
        relative_path = entry.path.relative_to(self.config.root).as_posix()
        if self._is_directory(entry):
            relative_path += "/"
        return rules.exclude(relative_path)

    def _handle_error(self, error: Union[OSError, EncodingFailureError]) -> None:
        if self.config.permission_action == PermissionAction.RAISE:
            raise error
        self.summary.skipped.append(str(error))

    def format_line(self, line: TreeLine) -> str:
        """Format a TreeLine as text, without a trailing newline."""
        if line.entry is None:
            return f"{line.prefix}{SPACE_PREFIX}{PLACEHOLDER}"

        text = line.entry.render(
            full_path=self.config.full_path,
            icons=not self.config.no_icons,
            color_level=None if self.config.no_color else line.level,
        )
        if line.is_root:
            return text
        connector = LAST_BRANCH if line.is_last else BRANCH
        return f"{line.prefix}{connector} {text}"

    def stream_tree(self) -> Iterator[str]:
        """Generate the tree one line at a time.

        Yields:
            Formatted lines without trailing newlines; the last one is the summary,
            e.g. ``"6 directories and 3 files"``.
        """
        for line in self.walk():
            yield self.format_line(line)
        yield str(self.summary)

    def get_tree_representation(self) -> str:
        """Get the complete tree, summary included, as a single string."""
        return "\n".join(self.stream_tree())

    def get_tree(self) -> FileSystemNode:
        """Build an anytree model of exactly the entries the text tree shows.

        Returns:
            The root node. Children keep display order, and nodes whose listing
            was cut short by overview mode have ``truncated`` set.

        Example:
            >>> from anytree import PreOrderIter
            >>> root = TreeRenderer(RenderConfig("src")).get_tree()  # doctest: +SKIP
            >>> [node.name for node in PreOrderIter(root)]  # doctest: +SKIP
            ['src', 'main.py', 'utils', 'helpers.py']
        """
        stack: List[FileSystemNode] = []
        for line in self.walk():
            if line.entry is None:
                stack[line.level - 1].truncated = True
            elif line.is_root:
                stack = [FileSystemNode(line.entry)]
            else:
                del stack[line.level :]
                stack.append(FileSystemNode(line.entry, parent=stack[-1]))
        return stack[0]


def render(config: RenderConfig, sink: TextIO) -> RunSummary:
    """Write the tree for ``config`` to a text sink, one newline-terminated line at a time.

    Args:
        config: What to render and how.
        sink: Any writable text stream, e.g. ``sys.stdout`` or ``io.StringIO``.

    Returns:
        The summary of the walk.
    """
    renderer = TreeRenderer(config)
    for line in renderer.stream_tree():
        sink.write(line + "\n")
    return renderer.summary

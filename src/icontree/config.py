"""Render configuration shared by the tree renderer and the CLI."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from icontree.exceptions import PathInvalidError
from icontree.exclusion_rules.base_rules import BaseExclusionRules
from icontree.file_system_tree.permission_action import PermissionAction

# Siblings shown per directory in overview mode before the "..." placeholder
OVERVIEW_LIMIT = 5

DEFAULT_MAX_DEPTH = 5


@dataclass(frozen=True)
class RenderConfig:
    """Everything that shapes one render. Immutable once built.

    Attributes:
        root: Directory to render. Must exist and be a directory.
        max_depth: Deepest frame that still lists its directory; frame 0 lists the
            root's children, so 0 shows a single level.
        include_hidden: Show entries whose name starts with a dot.
        directories_only: Show directories only.
        full_path: Label entries with their full path instead of their name.
        overview: Show at most OVERVIEW_LIMIT entries per directory.
        no_color: Disable per-depth label colours.
        no_icons: Disable icon glyphs.
        follow_symlinks: Treat symlinks to directories as directories and expand them.
        exclusion_rules: Optional rules hiding matching entries and their subtrees.
        permission_action: What to do when an entry or directory cannot be read.
            Accepts the enum or its string value.

    Raises:
        PathInvalidError: If ``root`` does not exist or is not a directory.
        ValueError: If ``max_depth`` is negative or ``permission_action`` is unknown.

    Example:
        >>> RenderConfig("/no/such/dir")
        Traceback (most recent call last):
        ...
        icontree.exceptions.PathInvalidError: '/no/such/dir' is not a valid directory
    """

    root: Path
    max_depth: int = DEFAULT_MAX_DEPTH
    include_hidden: bool = False
    directories_only: bool = False
    full_path: bool = False
    overview: bool = False
    no_color: bool = False
    no_icons: bool = False
    follow_symlinks: bool = False
    exclusion_rules: Optional[BaseExclusionRules] = None
    permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))

        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")

        if isinstance(self.permission_action, str) and not isinstance(self.permission_action, PermissionAction):
            try:
                action = PermissionAction(self.permission_action.lower())
            except ValueError:
                raise ValueError(
                    f"Invalid permission_action: {self.permission_action}. Must be one of: 'ignore', 'raise'"
                )
            object.__setattr__(self, "permission_action", action)

        if not self.root.is_dir():
            raise PathInvalidError(str(self.root))

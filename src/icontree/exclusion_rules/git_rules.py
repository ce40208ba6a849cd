"""Exclusion rules written in .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from icontree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax, matched by pathspec.

    Patterns can come from ignore files (``load_rules``) or be added one at a
    time (``add_rule``). Order is preserved across both sources, so a later
    negation (``!keep.log``) re-includes what an earlier pattern excluded,
    exactly as Git does.

    Attributes:
        spec (PathSpec): The compiled matcher for every pattern added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("build/")
        >>> rules.exclude("server.log")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")
        False
        >>> rules.exclude("src/main.py")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: A path-like object or a sequence of them pointing at
                files in .gitignore syntax.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    @property
    def patterns(self) -> List[str]:
        """The raw pattern lines, in the order they were added."""
        return list(self._lines)

    def exclude(self, path: str) -> bool:
        """Check a root-relative path against the loaded patterns.

        Args:
            path: Path relative to the render root, ``/``-separated, with a
                trailing ``/`` for directories.

        Returns:
            bool: True if the last matching pattern excludes the path.
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more ignore files.

        Args:
            rules_files: A path-like object or a sequence of them.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")
            with open(path, "r", encoding="utf-8") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern such as ``*.pyc`` or ``!keep.txt``."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)

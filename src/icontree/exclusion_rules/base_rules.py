from abc import ABC, abstractmethod
from typing import Sequence, Union

from icontree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that hide entries from the rendered tree.

    The tree renderer asks the rules about every entry it lists, passing the
    entry's path relative to the render root with forward slashes. Directories
    are passed with a trailing slash so that directory-only patterns such as
    ``build/`` can match them. An excluded directory is neither shown, counted
    nor descended into.

    Loading rules from files and adding single rules are optional capabilities;
    the default implementations raise NotImplementedError.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Decide whether an entry should be hidden.

        Args:
            path (str): Path of the entry relative to the render root, using ``/``
                as separator and ending in ``/`` for directories.

        Returns:
            bool: True if the entry should be left out of the tree.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load rules from one or more files.

        Args:
            rules_files: A path-like object or a sequence of them.

        Raises:
            NotImplementedError: If this rule type has no file format.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule.

        Args:
            rule (str): The rule text, in whatever syntax the implementation uses.

        Raises:
            NotImplementedError: If this rule type cannot take individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

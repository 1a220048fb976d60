from abc import ABC, abstractmethod
from typing import Sequence, Union

from dir2tree.types import PathType


class BaseExclusionRules(ABC):
    """
    Interface for deciding which directory entries the builder leaves out.

    The builder asks about every entry before it constructs a node for it, so an
    excluded entry is never checked for readability and never descended into.
    Paths are relative to the tree's root and always use forward slashes;
    directories are asked about twice, once without and once with a trailing
    slash.

    Example:
        >>> class HiddenEntries(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.rstrip("/").rsplit("/", 1)[-1].startswith(".")
        >>> rules = HiddenEntries()
        >>> rules.exclude("src/.cache/")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Return True if the entry at ``path`` should be left out of the tree.

        Args:
            path (str): Forward-slash path relative to the root of the tree.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load rules from one or more files.

        Raises:
            NotImplementedError: If this rule type cannot be loaded from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

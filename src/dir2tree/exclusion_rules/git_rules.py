"""Exclusion rules written in .gitignore syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from dir2tree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Matching is delegated to pathspec's GitIgnoreSpec, which follows Git's own
    semantics: globs, ``**``, directory-only patterns ending in ``/``, negation
    with ``!`` and comments. Patterns from every loaded file and every added rule
    are kept in the order they arrived, so a later negation can re-include an
    entry an earlier pattern excluded.

    Attributes:
        spec (GitIgnoreSpec): Compiled matcher for all patterns seen so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.pyc")
        >>> rules.add_rule("build/")
        >>> rules.exclude("pkg/module.pyc")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("pkg/module.py")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Create the rules, optionally loading patterns from files.

        Args:
            rules_files: A path or a sequence of paths to .gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")
            self._lines.extend(path.read_text().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern, e.g. ``"*.log"`` or ``"!keep.log"``."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = GitIgnoreSpec.from_lines(self._lines)

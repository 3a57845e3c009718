"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.pattern import Pattern

from dirtree.types import PathType

from .base_rules import BaseExclusionRules

# Name of the pathspec pattern factory implementing .gitignore semantics
PATTERN_STYLE = "gitwildmatch"


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Paths are matched the way Git does it, through the pathspec library. Globs,
    directory-only patterns (trailing /), negations (leading !), ** and comment
    lines are all supported. Patterns from files and patterns added one at a time
    share a single ordered list, so a later negation can re-include an entry that
    an earlier pattern excluded.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("app.log")
        True
        >>> rules.exclude("keep.log")
        False

    Note:
        Paths given to exclude() must use forward slashes, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: A path or a sequence of paths to files with .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[Pattern] = []
        self.spec = PathSpec([])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more .gitignore-style files.

        Args:
            rules_files: A path or a sequence of paths.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(PathSpec.from_lines(PATTERN_STYLE, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern such as "*.pyc" or "node_modules/"."""
        self._extend(PathSpec.from_lines(PATTERN_STYLE, [rule]).patterns)

    def _extend(self, patterns: Sequence[Pattern]) -> None:
        # The matcher is rebuilt on every change, never appended to in place
        self._patterns.extend(patterns)
        self.spec = PathSpec(list(self._patterns))

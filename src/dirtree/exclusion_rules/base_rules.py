from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Exclusion rules decide which entries the tree builder omits. An omitted entry
    contributes nothing to the tree: an excluded directory is never opened, so none
    of its contents are visited. Implementations must provide `exclude`; loading
    rules from files and adding individual rules are optional capabilities.

    Example:
        >>> from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('test.pyc')
        True
        >>> rules.exclude('test.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): The path to check, relative to the root of the tree and using
                forward slashes. Directory paths may carry a trailing slash.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def excludes_entry(self, relative_path: str, is_dir: bool) -> bool:
        """
        Determine if a directory entry should be left out of the tree.

        Directories are checked both with and without a trailing slash so that
        directory-only patterns such as "build/" apply to them.

        Args:
            relative_path (str): Path of the entry relative to the tree root.
            is_dir (bool): Whether the entry is a directory.

        Returns:
            bool: True if the entry should be omitted.

        Example:
            >>> from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule('build/')
            >>> rules.excludes_entry('build', is_dir=True)
            True
            >>> rules.excludes_entry('build', is_dir=False)
            False
        """
        if self.exclude(relative_path):
            return True
        return is_dir and self.exclude(relative_path + "/")

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, in the format of the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

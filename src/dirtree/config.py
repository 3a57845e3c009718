"""Resolved traversal and rendering configuration.

These values are produced by the command-line layer (or built directly by library
callers) and consumed by the tree builder and the tree renderer.
"""

from dataclasses import dataclass
from typing import Optional

from dirtree.exclusion_rules.base_rules import BaseExclusionRules


@dataclass(frozen=True)
class FilterConfig:
    """Traversal policy applied while building a tree.

    Attributes:
        include_hidden: Whether entries whose name starts with "." are included.
        max_depth: Deepest level whose entries are listed, counting the root's
            immediate children as level 1. None means unbounded and 0 means the
            root is not expanded at all.
        sort_by_name: Sort each directory listing by name instead of keeping the
            platform's listing order.
        exclusion_rules: Optional rules; matching entries are omitted entirely.

    Example:
        >>> FilterConfig(max_depth=2).max_depth
        2
        >>> FilterConfig(max_depth=-1)
        Traceback (most recent call last):
        ...
        ValueError: max_depth must be a non-negative integer, got -1
    """

    include_hidden: bool = False
    max_depth: Optional[int] = None
    sort_by_name: bool = False
    exclusion_rules: Optional[BaseExclusionRules] = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {self.max_depth}")


@dataclass(frozen=True)
class RenderConfig:
    """Rendering options. Purely cosmetic, no effect on tree contents.

    Attributes:
        use_ascii_glyphs: Draw connectors with ASCII characters instead of box-drawing ones.
    """

    use_ascii_glyphs: bool = False

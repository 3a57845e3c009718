"""Text rendering of a filesystem tree.

Rendering is a depth-first, pre-order traversal that keeps one padding marker per
ancestor level. Each marker records whether that ancestor was the last child of
its own parent, which decides whether a vertical bar or blank space is drawn
beneath it on every deeper line.

Example output with the default glyphs:

    .
    ├───docs
    │   └───index.md
    └───src
        └───main.py
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from anytree import AbstractStyle

from dirtree.config import RenderConfig
from dirtree.file_system_tree.file_system_node import FileSystemNode


class UnicodeGlyphs(AbstractStyle):  # type: ignore
    """Box-drawing connectors.

    >>> glyphs = UnicodeGlyphs()
    >>> glyphs.cont, glyphs.end
    ('├───', '└───')
    """

    def __init__(self) -> None:
        super().__init__("│   ", "├───", "└───")


class AsciiGlyphs(AbstractStyle):  # type: ignore
    """ASCII-only connectors.

    >>> glyphs = AsciiGlyphs()
    >>> glyphs.cont, glyphs.end
    ('|---', '\\\\---')
    """

    def __init__(self) -> None:
        super().__init__("|   ", "|---", "\\---")


class Padding(Enum):
    """What to draw beneath an ancestor on the lines of its descendants."""

    BLANK = "blank"
    BAR = "bar"


def get_glyphs(config: Optional[RenderConfig] = None) -> AbstractStyle:
    """Select the glyph set for a render configuration."""
    if config is not None and config.use_ascii_glyphs:
        return AsciiGlyphs()
    return UnicodeGlyphs()


def render_tree(tree: FileSystemNode, config: Optional[RenderConfig] = None) -> Iterator[str]:
    """Render a tree one line at a time.

    The root line is the root's name alone. Every other line is the padding of its
    ancestors, then the "last" connector if the node is the final child of its
    parent or the "continuing" connector otherwise, then the node's name. Siblings
    appear in the order they were attached.

    Args:
        tree: Root of the tree to render.
        config: Rendering options. Defaults to RenderConfig().

    Yields:
        Lines of the diagram, without trailing newlines.

    Example:
        >>> from dirtree.file_system_tree.file_system_node import DirectoryNode, FileNode
        >>> root = DirectoryNode(".", children=[FileNode("x"), FileNode("y")])
        >>> for line in render_tree(root, RenderConfig(use_ascii_glyphs=True)):
        ...     print(line)
        .
        |---x
        \\---y
    """
    glyphs = get_glyphs(config)
    padding: List[Padding] = []
    # One open directory per level: its children, the index of the next child to
    # draw and the indent shared by all of its children's lines
    levels: List[Tuple[Tuple[FileSystemNode, ...], int, str]] = [(tree.children, 0, "")]

    yield tree.name

    while levels:
        children, index, indent = levels[-1]
        if index == len(children):
            levels.pop()
            if levels:
                padding.pop()
            continue
        levels[-1] = (children, index + 1, indent)

        child = children[index]
        is_last = index == len(children) - 1
        connector = glyphs.end if is_last else glyphs.cont
        yield f"{indent}{connector}{child.name}"

        if child.children:
            padding.append(Padding.BLANK if is_last else Padding.BAR)
            levels.append((child.children, 0, _indent(padding, glyphs)))


def _indent(padding: List[Padding], glyphs: AbstractStyle) -> str:
    return "".join(glyphs.empty if marker is Padding.BLANK else glyphs.vertical for marker in padding)

from os import PathLike
from typing import NamedTuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class DirectoryEntry(NamedTuple):
    """A single entry produced by listing a directory.

    Attributes:
        name: The final path component of the entry.
        is_dir: True if the entry is a directory. Symlinks are never followed, so a
            symlink to a directory reports False.
        path: The path used to descend into the entry.
    """

    name: str
    is_dir: bool
    path: str

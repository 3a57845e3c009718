"""Directory tree visualization utilities.

This package provides tools for building an in-memory tree of a directory and
rendering it as an indented, connector-annotated text diagram.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"

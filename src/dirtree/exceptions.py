from typing import Optional


class TreeBuildError(OSError):
    """
    Exception raised when the filesystem cannot be read while building a tree.

    Any failure to open or iterate a directory, or to query the type of one of its
    entries, aborts the whole build with this error. It keeps the errno and strerror
    of the underlying OSError so callers can still reason about the cause, and it
    records the path whose access failed.

    Attributes:
        path (str): The path being read when the failure occurred.
        cause (OSError): The original error raised by the operating system.

    Example:
        >>> import errno
        >>> cause = FileNotFoundError(errno.ENOENT, "No such file or directory")
        >>> error = TreeBuildError("missing", cause)
        >>> str(error)
        "Cannot read 'missing': No such file or directory"
        >>> error.errno == errno.ENOENT
        True
    """

    def __init__(self, path: str, cause: OSError) -> None:
        """
        Initialize the exception from the failing path and the original error.

        Args:
            path (str): The path being read when the failure occurred.
            cause (OSError): The error raised by the operating system.
        """
        super().__init__(cause.errno, cause.strerror, path)
        self.path = path
        self.cause = cause

    @property
    def is_permission_error(self) -> bool:
        """True if the underlying cause is a permission denial."""
        return isinstance(self.cause, PermissionError)

    def __str__(self) -> str:
        reason: Optional[str] = self.cause.strerror or str(self.cause)
        return f"Cannot read {self.path!r}: {reason}"

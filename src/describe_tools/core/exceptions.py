"""Exception hierarchy for describe-tools."""

from typing import Optional


class DescribeToolsError(Exception):
    """Base exception for all describe-tools errors."""

    pass


class ValidationError(DescribeToolsError):
    """Raised when validation fails."""

    pass


class DescribeIOError(DescribeToolsError):
    """Raised when a filesystem operation on a describe path fails.

    Covers stat, directory listing, read, directory creation and write
    failures. The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class DescribeParseError(DescribeToolsError):
    """Raised when a describe file does not contain valid JSON."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RemoteDescribeError(DescribeToolsError):
    """Raised when the remote describe service call fails."""

    def __init__(self, message: str, object_name: Optional[str] = None):
        super().__init__(message)
        self.object_name = object_name

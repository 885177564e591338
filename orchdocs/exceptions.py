"""Exceptions raised by orchdocs runs."""


class OrchdocsError(Exception):
    """Base exception for orchdocs operations."""

    pass


class SourceNotFoundError(OrchdocsError):
    """Raised when the source directory does not exist."""

    pass


class UnsafeCleanError(OrchdocsError):
    """Raised when cleaning the output directory would delete sources."""

    pass

from __future__ import annotations


class HoconfmtError(Exception):
    """Base class for per-file processing failures."""


class ReadError(HoconfmtError):
    pass


class FormatError(HoconfmtError):
    pass


class WriteBackError(HoconfmtError):
    pass


class DiffError(HoconfmtError):
    pass


class UsageError(HoconfmtError):
    pass


class SkippedFile(Exception):
    """Raised when a named file cannot be opened; the file is skipped."""

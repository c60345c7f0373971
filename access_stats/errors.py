"""Exceptions raised by access-stats."""


class FileAccessError(Exception):
    """Raised when the input log file cannot be opened or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read log file {path!r}: {reason}")

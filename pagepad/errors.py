"""Exceptions raised by pagepad."""

from typing import Optional


class PagepadError(Exception):
    """Base class for pagepad errors."""


class FileError(PagepadError):
    """A document or backup file could not be opened, read or written."""

    def __init__(self, path: str, action: str, reason: Optional[str] = None):
        self.path = path
        self.action = action
        self.reason = reason
        message = f"Cannot {action} {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class SettingsError(PagepadError):
    """A settings value failed validation."""

"""configster exception hierarchy."""

from __future__ import annotations


class ConfigsterError(Exception):
    """Base exception for all configster errors."""


class FileOpenError(ConfigsterError, OSError):
    """The configuration file could not be opened."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open {path}: {reason}")


class LineReadError(ConfigsterError, OSError):
    """A line could not be read or decoded. The whole parse is aborted."""

    def __init__(self, path: str, line_number: int, reason: str) -> None:
        self.path = path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{path}:{line_number}: cannot read line: {reason}")


class SettingsError(ConfigsterError):
    """The settings file is malformed or holds invalid values."""

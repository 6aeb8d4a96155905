"""Exception types raised by the merge engine and the scaffolder."""

from __future__ import annotations

from pathlib import Path


class CraftError(RuntimeError):
    """Base class for every failure the command line reports to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ValidationError(CraftError, ValueError):
    """Raised for invalid input before any file is touched."""


class DuplicateMethodError(CraftError):
    """Raised when a route file already declares the requested handler."""

    def __init__(self, method: str, path: Path | str | None = None) -> None:
        self.method = method
        self.path = path
        location = f" in {path}" if path is not None else ""
        super().__init__(f"Method {method} already exists{location}")


class MalformedFileError(CraftError):
    """Raised when an existing file lacks a structural marker the merge needs."""

    def __init__(self, message: str, *, marker: str, path: Path | str | None = None) -> None:
        self.marker = marker
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


__all__ = ["CraftError", "DuplicateMethodError", "MalformedFileError", "ValidationError"]

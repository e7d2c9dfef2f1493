"""Exceptions raised by the scaffolder and the CLI."""

from __future__ import annotations

from pathlib import Path


class AgenticEngineError(Exception):
    """Base class for errors that end a run with a short message."""


class UserCancelled(AgenticEngineError):
    """Raised when the interactive questionnaire is aborted."""

    def __init__(self, message: str = "Operation cancelled.") -> None:
        super().__init__(message)


class FileSystemError(AgenticEngineError):
    """Raised when a directory or file cannot be created or listed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")

"""Exceptions raised while setting up a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every express-scaffold failure."""


class StageError(ScaffoldError):
    """Raised when a package manager stage does not complete successfully."""

    def __init__(
        self,
        stage: str,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.stage = stage
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class ManifestError(ScaffoldError):
    """Raised when the manifest cannot be read, parsed, or written."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message)

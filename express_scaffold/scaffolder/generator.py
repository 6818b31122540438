"""Filesystem side of the scaffold: existence guard, placeholders, templates.

Directories and placeholder files are only created when missing.  Template
files are rewritten on every call to :meth:`ScaffoldWriter.write_templates`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from .layout import DIRECTORIES, PLACEHOLDER_FILES
from .templates import TEMPLATE_FILES


def missing_directories(root: Path, directories: Iterable[str] = DIRECTORIES) -> list[str]:
    """Return the entries of *directories* that do not exist under *root*."""
    return [d for d in directories if not (root / d).is_dir()]


def is_scaffolded(root: Path, directories: Iterable[str] = DIRECTORIES) -> bool:
    """Return ``True`` when every layout directory already exists under *root*."""
    return not missing_directories(root, directories)


class ScaffoldWriter:
    """Writes the project skeleton into a target root.

    The three steps are exposed separately so callers control ordering:
    directories first, then placeholders, then templates.  Any ``OSError``
    propagates; whatever was written before it stays on disk.
    """

    def __init__(
        self,
        root: Path,
        directories: Iterable[str] = DIRECTORIES,
        placeholders: Iterable[str] = PLACEHOLDER_FILES,
        templates: Mapping[str, str] = TEMPLATE_FILES,
    ) -> None:
        self.root = Path(root)
        self.directories = tuple(directories)
        self.placeholders = tuple(placeholders)
        self.templates = templates

    # -- Public API --------------------------------------------------------

    def write_directories(self) -> list[Path]:
        """Create every missing layout directory, including parents.

        Returns:
            The directories that were created by this call.
        """
        created: list[Path] = []
        for relative in self.directories:
            path = self.root / relative
            if path.is_dir():
                continue
            path.mkdir(parents=True, exist_ok=True)
            created.append(path)
        return created

    def write_placeholders(self) -> list[Path]:
        """Create every missing placeholder as an empty file.

        Existing files are left untouched, whatever their content.

        Returns:
            The files that were created by this call.
        """
        created: list[Path] = []
        for relative in self.placeholders:
            path = self.root / relative
            if path.exists():
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")
            created.append(path)
        return created

    def write_templates(self) -> list[Path]:
        """Write every template file with its literal content, overwriting."""
        written: list[Path] = []
        for relative, content in self.templates.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8", newline="\n")
            written.append(path)
        return written

"""express-scaffold configuration.

Typed settings for the dependency pipeline. The project layout and template
content are fixed; only the package manager invocation can be tuned.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

WORKSPACE_ENV_VAR = "EXPRESS_SCAFFOLD_WORKSPACE"


class ScaffoldConfig(BaseModel):
    """Settings for one scaffold run.

    Instances are created once by the CLI entry point (usually via
    :meth:`from_env`) and passed to ``ExpressProjectSetup``.
    """

    package_manager: str = Field(default="npm", min_length=1)
    runtime_dependency: str = Field(default="express", min_length=1)
    dev_dependency: str = Field(default="nodemon", min_length=1)
    module_type: str = Field(default="module")
    start_script: str = Field(default="node src/server.js")
    dev_script: str = Field(default="nodemon src/server.js")
    manifest_name: str = Field(default="package.json")
    process_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-stage timeout in seconds; None waits indefinitely",
    )

    # ------------------------------------------------------------------
    # Derived commands (read-only properties)
    # ------------------------------------------------------------------

    @property
    def init_command(self) -> list[str]:
        """Command that creates the manifest with default answers."""
        return [self.package_manager, "init", "-y"]

    @property
    def runtime_install_command(self) -> list[str]:
        """Command that installs the runtime dependency."""
        return [self.package_manager, "install", self.runtime_dependency]

    @property
    def dev_install_command(self) -> list[str]:
        """Command that installs the development-only dependency."""
        return [self.package_manager, "install", "--save-dev", self.dev_dependency]

    def manifest_path(self, root: Path) -> Path:
        """Location of the manifest inside *root*."""
        return root / self.manifest_name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            EXPRESS_SCAFFOLD_PACKAGE_MANAGER, EXPRESS_SCAFFOLD_PROCESS_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESS_SCAFFOLD_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["EXPRESS_SCAFFOLD_PACKAGE_MANAGER"]
        if os.environ.get("EXPRESS_SCAFFOLD_PROCESS_TIMEOUT"):
            kwargs["process_timeout"] = float(os.environ["EXPRESS_SCAFFOLD_PROCESS_TIMEOUT"])
        return cls(**kwargs)


def resolve_workspace(directory: str | Path | None = None) -> Path | None:
    """Return the target root to scaffold into, or ``None`` if there is none.

    The explicit *directory* wins, then ``EXPRESS_SCAFFOLD_WORKSPACE``, then
    the current working directory.  A candidate that does not exist or is not
    a directory resolves to ``None``.
    """
    if directory is not None:
        candidate = Path(directory)
    elif os.environ.get(WORKSPACE_ENV_VAR):
        candidate = Path(os.environ[WORKSPACE_ENV_VAR])
    else:
        candidate = Path.cwd()

    candidate = candidate.expanduser()
    if not candidate.is_dir():
        return None
    return candidate.resolve()

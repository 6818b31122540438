"""Dependency pipeline: package manager init, manifest patch, installs.

The pipeline is a linear chain of stages::

    INIT -> (manifest patch) -> INSTALL_RUNTIME -> INSTALL_DEV -> DONE

Each stage's process must exit successfully before the next one starts.  The
first failing stage moves the pipeline to ``FAILED`` and nothing after it runs.
Effects of completed stages are kept.
"""

from __future__ import annotations

import shutil
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape

from express_scaffold.config import ScaffoldConfig
from express_scaffold.errors import StageError
from express_scaffold.manifest import patch_manifest
from express_scaffold.utils import console, run_command


class PipelineStage(str, Enum):
    """Position of the dependency pipeline."""

    INIT = "init"
    INSTALL_RUNTIME = "install_runtime"
    INSTALL_DEV = "install_dev"
    DONE = "done"
    FAILED = "failed"


class StageResult(BaseModel):
    """Outcome of one package manager invocation."""

    stage: PipelineStage
    command: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class PipelineResult(BaseModel):
    """Final state of a pipeline run."""

    state: PipelineStage = PipelineStage.INIT
    failed_stage: PipelineStage | None = None
    error: str = ""
    stages: list[StageResult] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.state is PipelineStage.DONE


class DependencyPipeline:
    """Runs the package manager stages for one target root.

    Attributes:
        root: Working directory of every stage.
        config: Package manager commands and manifest settings.
    """

    def __init__(self, root: Path, config: ScaffoldConfig | None = None) -> None:
        self.root = Path(root)
        self.config = config or ScaffoldConfig()

    async def run(self) -> PipelineResult:
        """Run every stage in order and return the final state.

        Stage failures are recorded in the result.  A ``ManifestError`` from
        the patch step is not a stage failure and propagates to the caller.
        """
        result = PipelineResult()
        try:
            await self._run_stage(PipelineStage.INIT, self.config.init_command, result)
            patch_manifest(self.root, self.config)
            console.print(
                f"  [green]+[/green] Patched {self.config.manifest_name} "
                f"(type={self.config.module_type}, scripts: start, dev)"
            )
            await self._run_stage(
                PipelineStage.INSTALL_RUNTIME, self.config.runtime_install_command, result
            )
            await self._run_stage(
                PipelineStage.INSTALL_DEV, self.config.dev_install_command, result
            )
        except StageError as exc:
            result.failed_stage = PipelineStage(exc.stage)
            result.state = PipelineStage.FAILED
            result.error = str(exc)
            return result

        result.state = PipelineStage.DONE
        return result

    # -- Internals ---------------------------------------------------------

    async def _run_stage(
        self, stage: PipelineStage, cmd: list[str], result: PipelineResult
    ) -> StageResult:
        result.state = stage
        cmd_str = " ".join(cmd)
        console.print(f"[cyan]Running[/cyan] [bold]{escape(cmd_str)}[/bold]...")

        # npm ships as npm.cmd on Windows; exec needs the resolved file.
        executable = shutil.which(cmd[0]) or cmd[0]
        try:
            returncode, stdout, stderr = await run_command(
                [executable, *cmd[1:]],
                cwd=self.root,
                timeout=self.config.process_timeout,
            )
        except OSError as exc:
            returncode, stdout, stderr = -1, "", str(exc)

        stage_result = StageResult(
            stage=stage,
            command=list(cmd),
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )
        result.stages.append(stage_result)

        if stdout:
            console.print(stdout, style="dim", markup=False, highlight=False)

        if not stage_result.success:
            raise StageError(
                stage.value,
                self.failure_message(stage),
                command=cmd_str,
                returncode=returncode,
                stderr=stderr,
            )
        return stage_result

    def failure_message(self, stage: PipelineStage) -> str:
        """User-facing message for a failed *stage*."""
        if stage is PipelineStage.INIT:
            return f"Error initializing {self.config.package_manager} project."
        if stage is PipelineStage.INSTALL_RUNTIME:
            return f"Error installing {self.config.runtime_dependency}."
        if stage is PipelineStage.INSTALL_DEV:
            return f"Error installing {self.config.dev_dependency}."
        return f"Error in stage {stage.value}."

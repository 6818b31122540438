"""Express project setup orchestrator.

Drives one scaffold run against a target root:

1. Workspace  -- a target root must be available.
2. Guard      -- stop early when every layout directory already exists.
3. Scaffold   -- create missing directories and placeholder files.
4. Templates  -- (re)write the fixed starter files.
5. Pipeline   -- package manager init, manifest patch, dependency installs.

Every run ends with exactly one :class:`SetupOutcome`.

Usage::

    express-scaffold
    express-scaffold --directory ./my-api
    python -m express_scaffold --package-manager pnpm --timeout 300
"""

from __future__ import annotations

import asyncio
import sys
import threading
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ValidationError
from rich.markup import escape
from rich.panel import Panel

from express_scaffold.config import ScaffoldConfig, resolve_workspace
from express_scaffold.pipeline import DependencyPipeline, PipelineResult, PipelineStage
from express_scaffold.scaffolder import ScaffoldWriter, is_scaffolded
from express_scaffold.utils import (
    console,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


class OutcomeKind(str, Enum):
    MISSING_WORKSPACE = "missing_workspace"
    ALREADY_SCAFFOLDED = "already_scaffolded"
    INIT_FAILED = "init_failed"
    RUNTIME_INSTALL_FAILED = "runtime_install_failed"
    DEV_INSTALL_FAILED = "dev_install_failed"
    UNEXPECTED_ERROR = "unexpected_error"
    SUCCESS = "success"


_STAGE_OUTCOMES: dict[PipelineStage, OutcomeKind] = {
    PipelineStage.INIT: OutcomeKind.INIT_FAILED,
    PipelineStage.INSTALL_RUNTIME: OutcomeKind.RUNTIME_INSTALL_FAILED,
    PipelineStage.INSTALL_DEV: OutcomeKind.DEV_INSTALL_FAILED,
}


class SetupOutcome(BaseModel):
    """The single terminal result of a setup run."""

    kind: OutcomeKind
    level: Literal["error", "warning", "info"]
    message: str
    pipeline: PipelineResult | None = None

    @property
    def ok(self) -> bool:
        """Whether the run left the project in a usable state."""
        return self.kind in (OutcomeKind.SUCCESS, OutcomeKind.ALREADY_SCAFFOLDED)


def _unexpected(exc: BaseException) -> SetupOutcome:
    detail = str(exc)
    if not detail:
        return SetupOutcome(
            kind=OutcomeKind.UNEXPECTED_ERROR,
            level="error",
            message="An unknown error occurred.",
        )
    return SetupOutcome(
        kind=OutcomeKind.UNEXPECTED_ERROR,
        level="error",
        message=f"Error setting up project: {detail}",
    )


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

# Target roots with a run in progress, shared by every instance in the process.
_active_roots: set[Path] = set()
_active_lock = threading.Lock()


class ExpressProjectSetup:
    """Scaffolds an Express.js project into a target root.

    Attributes:
        config: Package manager and manifest settings.
        verbose: Print every path created by the scaffold step.
    """

    def __init__(self, config: ScaffoldConfig | None = None, *, verbose: bool = False) -> None:
        self.config = config or ScaffoldConfig()
        self.verbose = verbose

    async def run(self, root: str | Path | None) -> SetupOutcome:
        """Set up the project in *root* and report the outcome.

        Args:
            root: Target root, or ``None`` when no workspace is available.

        Returns:
            The outcome, which has also been printed to the console.
        """
        if root is None:
            return self._report(
                SetupOutcome(
                    kind=OutcomeKind.MISSING_WORKSPACE,
                    level="error",
                    message="Please open a folder first.",
                )
            )

        target = Path(root).resolve()
        with _active_lock:
            busy = target in _active_roots
            if not busy:
                _active_roots.add(target)
        if busy:
            return self._report(
                SetupOutcome(
                    kind=OutcomeKind.UNEXPECTED_ERROR,
                    level="error",
                    message=f"A setup is already running for {target}.",
                )
            )

        try:
            outcome = await self._run(target)
        finally:
            with _active_lock:
                _active_roots.discard(target)
        return self._report(outcome)

    async def _run(self, root: Path) -> SetupOutcome:
        try:
            if is_scaffolded(root):
                return SetupOutcome(
                    kind=OutcomeKind.ALREADY_SCAFFOLDED,
                    level="warning",
                    message="Express project structure already exists.",
                )

            console.print(
                Panel(
                    f"[bold bright_cyan]Express project setup[/bold bright_cyan]\n"
                    f"Target          : {escape(str(root))}\n"
                    f"Package manager : {escape(self.config.package_manager)}",
                    border_style="bright_cyan",
                )
            )

            writer = ScaffoldWriter(root)
            created = writer.write_directories()
            created += writer.write_placeholders()
            writer.write_templates()
            console.print(
                f"  [green]+[/green] Created {len(created)} path(s), "
                f"wrote {len(writer.templates)} template file(s)"
            )
            if self.verbose:
                for path in created:
                    console.print(f"    [dim]{escape(path.relative_to(root).as_posix())}[/dim]")

            result = await DependencyPipeline(root, self.config).run()
        except Exception as exc:
            # Guard and scaffold OSErrors, ManifestError and anything unforeseen.
            return _unexpected(exc)

        if result.success:
            return SetupOutcome(
                kind=OutcomeKind.SUCCESS,
                level="info",
                message="Express project setup complete!",
                pipeline=result,
            )

        kind = _STAGE_OUTCOMES.get(result.failed_stage, OutcomeKind.UNEXPECTED_ERROR)
        return SetupOutcome(kind=kind, level="error", message=result.error, pipeline=result)

    def _report(self, outcome: SetupOutcome) -> SetupOutcome:
        if outcome.pipeline is not None and outcome.pipeline.stages:
            print_summary_table(
                [
                    (
                        stage.stage.value,
                        f"{'ok' if stage.success else 'failed'} "
                        f"(exit {stage.returncode}): {' '.join(stage.command)}",
                    )
                    for stage in outcome.pipeline.stages
                ],
                title="Dependency pipeline",
            )

        if outcome.level == "error":
            print_error(outcome.message)
        elif outcome.level == "warning":
            print_warning(outcome.message)
        elif outcome.kind is OutcomeKind.SUCCESS:
            print_success(outcome.message)
        else:
            print_info(outcome.message)
        return outcome


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``express-scaffold`` and ``python -m express_scaffold``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Scaffold an Express.js project and install its dependencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  express-scaffold\n"
            "  express-scaffold -d ./my-api\n"
            "  express-scaffold --package-manager pnpm --timeout 300\n"
        ),
    )
    parser.add_argument(
        "--directory", "-d",
        default=None,
        help="Target folder (default: $EXPRESS_SCAFFOLD_WORKSPACE, then the current directory)",
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="Package manager executable (default: npm)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-stage process timeout in seconds (default: no timeout)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every created path",
    )

    args = parser.parse_args(argv)

    try:
        config = ScaffoldConfig.from_env()
        overrides = {}
        if args.package_manager:
            overrides["package_manager"] = args.package_manager
        if args.timeout is not None:
            overrides["process_timeout"] = args.timeout
        if overrides:
            config = ScaffoldConfig(**{**config.model_dump(), **overrides})
    except (ValidationError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {escape(str(exc))}")
        return 2

    setup = ExpressProjectSetup(config, verbose=args.verbose)
    outcome = asyncio.run(setup.run(resolve_workspace(args.directory)))
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())

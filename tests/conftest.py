"""Shared pytest fixtures for the express-scaffold test suite.

Provides reusable fixtures for:
- Temporary workspace directories
- Mock subprocess helpers
- A fake package manager that records invocations and writes a manifest
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty target root (auto-cleanup)."""
    root = tmp_path / "workspace"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

def _make_process(stdout: str = "", stderr: str = "", returncode: int = 0) -> AsyncMock:
    mock_proc = AsyncMock()
    mock_proc.communicate = AsyncMock(
        return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
    )
    mock_proc.returncode = returncode
    mock_proc.pid = 99999
    mock_proc.kill = MagicMock()
    mock_proc.wait = AsyncMock(return_value=returncode)
    return mock_proc


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    return _make_process


# ---------------------------------------------------------------------------
# Fake package manager
# ---------------------------------------------------------------------------

DEFAULT_INIT_MANIFEST: dict[str, Any] = {
    "name": "workspace",
    "version": "1.0.0",
    "description": "",
    "main": "index.js",
    "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
    "keywords": [],
    "author": "",
    "license": "ISC",
}


def stage_of(args: list[str]) -> str:
    """Map package manager arguments to the pipeline stage they belong to."""
    if len(args) > 1 and args[1] == "init":
        return "init"
    if "--save-dev" in args:
        return "install_dev"
    return "install_runtime"


class FakePackageManager:
    """Stands in for ``asyncio.create_subprocess_exec``.

    Records every invocation as ``(args, cwd)``.  A successful ``init`` writes
    :attr:`manifest` to ``package.json`` in the working directory, like
    ``npm init -y`` does.  Set ``returncodes[stage]`` to make a stage fail and
    ``gate`` to hold every process until the event is set.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], str | None]] = []
        self.returncodes: dict[str, int] = {}
        self.manifest: dict[str, Any] | str = dict(DEFAULT_INIT_MANIFEST)
        self.gate: asyncio.Event | None = None

    @property
    def stages(self) -> list[str]:
        return [stage_of(args) for args, _ in self.calls]

    async def __call__(self, *cmd: str, **kwargs: Any) -> AsyncMock:
        args = list(cmd)
        cwd = kwargs.get("cwd")
        self.calls.append((args, cwd))
        if self.gate is not None:
            await self.gate.wait()

        stage = stage_of(args)
        returncode = self.returncodes.get(stage, 0)
        if stage == "init" and returncode == 0 and cwd:
            content = self.manifest
            if not isinstance(content, str):
                content = json.dumps(content, indent=2)
            (Path(cwd) / "package.json").write_text(content, encoding="utf-8")

        stderr = "npm ERR! simulated failure" if returncode else ""
        return _make_process(
            stdout=f"{' '.join(args[1:])} done",
            stderr=stderr,
            returncode=returncode,
        )


@pytest.fixture
def fake_npm(monkeypatch: pytest.MonkeyPatch) -> FakePackageManager:
    """Patch subprocess creation with a :class:`FakePackageManager`."""
    fake = FakePackageManager()
    monkeypatch.setattr("asyncio.create_subprocess_exec", fake)
    return fake

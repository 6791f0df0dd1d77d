"""Tests for the subprocess-backed command runner."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from create_tslib.scaffolder.commands import SubprocessCommandRunner


pytestmark = pytest.mark.unit


class TestSubprocessCommandRunner:
    async def test_success(self, tmp_path: Path):
        runner = SubprocessCommandRunner(timeout=30)
        assert await runner.run([sys.executable, "-c", "pass"], tmp_path) is True

    async def test_non_zero_exit(self, tmp_path: Path):
        runner = SubprocessCommandRunner(timeout=30)
        ok = await runner.run([sys.executable, "-c", "import sys; sys.exit(3)"], tmp_path)
        assert ok is False

    async def test_runs_inside_cwd(self, tmp_path: Path):
        runner = SubprocessCommandRunner(timeout=30)
        script = "import pathlib; pathlib.Path('marker.txt').write_text('here')"
        assert await runner.run([sys.executable, "-c", script], tmp_path) is True
        assert (tmp_path / "marker.txt").read_text() == "here"

    async def test_missing_executable(self, tmp_path: Path):
        runner = SubprocessCommandRunner(timeout=30)
        assert await runner.run(["definitely-not-a-real-binary-xyz"], tmp_path) is False

    async def test_timeout_counts_as_failure(self, tmp_path: Path):
        with patch(
            "create_tslib.scaffolder.commands.run_command",
            AsyncMock(return_value=(-1, "", "Command timed out after 10s: pnpm install")),
        ):
            ok = await SubprocessCommandRunner(timeout=10).run(["pnpm", "install"], tmp_path)
        assert ok is False

    async def test_passes_timeout_and_inherits_streams(self, tmp_path: Path):
        mock = AsyncMock(return_value=(0, "", ""))
        with patch("create_tslib.scaffolder.commands.run_command", mock):
            await SubprocessCommandRunner(timeout=42).run(["git", "init"], tmp_path)

        mock.assert_awaited_once_with(["git", "init"], cwd=tmp_path, timeout=42, capture=False)

"""Shared pytest fixtures for the create-tslib test suite.

Provides reusable fixtures for:
- Temporary working directories
- Sample answer records
- Mocked prompter and command runner
- A ready-to-use ProjectGenerator wired to the mocks
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from create_tslib.config import Config, PackageManager
from create_tslib.scaffolder import AnswerRecord, ProjectGenerator, TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Empty directory acting as the user's current directory."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    yield directory


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_answers() -> AnswerRecord:
    """A fully populated answer record."""
    return AnswerRecord(
        project_name="My Cool App",
        author_name="Jane Doe",
        description="A tiny library that says hello.",
        keywords=["typescript", "library", "hello"],
        repository_url="https://github.com/example/my-cool-app",
        package_manager=PackageManager.PNPM,
    )


@pytest.fixture
def minimal_answers() -> AnswerRecord:
    """Only the mandatory project name; every other answer left at its default."""
    return AnswerRecord(project_name="minimal")


# ---------------------------------------------------------------------------
# Mocked collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_runner() -> MagicMock:
    """Command runner whose ``run`` always succeeds unless reconfigured."""
    runner = MagicMock()
    runner.run = AsyncMock(return_value=True)
    return runner


@pytest.fixture
def mock_prompter(sample_answers: AnswerRecord) -> MagicMock:
    """Prompter returning ``sample_answers`` without touching the terminal."""
    prompter = MagicMock()
    prompter.collect.return_value = sample_answers
    return prompter


@pytest.fixture
def test_config() -> Config:
    """Configuration with install and git enabled and no env influence."""
    return Config(install=True, git=True)


@pytest.fixture
def generator(
    mock_prompter: MagicMock, mock_runner: MagicMock, test_config: Config
) -> ProjectGenerator:
    """ProjectGenerator using the bundled templates and mocked processes."""
    return ProjectGenerator(
        prompter=mock_prompter,
        renderer=TemplateRenderer(),
        runner=mock_runner,
        config=test_config,
    )

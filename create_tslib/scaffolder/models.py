"""Pydantic v2 models for the create-tslib scaffolder.

Defines the answers collected from the user and the summary returned once a
project has been generated.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ..config import PackageManager
from ..utils import parse_keywords, to_kebab_case, to_pascal_case


PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\-_\s.]+$")
PROJECT_NAME_HINT = (
    "Project name may only include letters, numbers, underscores, hyphens, "
    "spaces and dots"
)


def check_project_name(value: str) -> str | None:
    """Return an error message when *value* is not an acceptable project name."""
    if not PROJECT_NAME_PATTERN.match(value):
        return PROJECT_NAME_HINT
    return None


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

class AnswerRecord(BaseModel):
    """Metadata entered by the user for a new library."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Display name, kept verbatim")
    author_name: str = Field(default="", description="Author for package.json")
    description: str = Field(default="", description="Short project description")
    keywords: list[str] = Field(default_factory=list, description="npm keywords")
    repository_url: str = Field(default="", description="Git repository URL")
    package_manager: PackageManager = Field(default=PackageManager.PNPM)

    @field_validator("project_name")
    @classmethod
    def _validate_project_name(cls, value: str) -> str:
        message = check_project_name(value)
        if message:
            raise ValueError(message)
        return value

    @field_validator("keywords", mode="before")
    @classmethod
    def _split_keywords(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return parse_keywords(value)
        if isinstance(value, (list, tuple)):
            return [str(item).strip() for item in value if str(item).strip()]
        return value

    @computed_field  # type: ignore[misc]
    @property
    def project_name_kebab(self) -> str:
        """Directory and package name derived from ``project_name``."""
        return to_kebab_case(self.project_name)

    def template_context(self) -> dict[str, Any]:
        """Every value a template may ask for, keyed by template variable name."""
        return {
            "project_name": self.project_name,
            "project_name_kebab": self.project_name_kebab,
            "library_name": to_pascal_case(self.project_name_kebab) or "Library",
            "author_name": self.author_name,
            "description": self.description,
            "keywords": list(self.keywords),
            "repository_url": self.repository_url,
            "package_manager": self.package_manager.value,
            "run_command": self.package_manager.run_prefix,
        }


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class ProjectSummary(BaseModel):
    """Outcome of a successful generation run."""

    project_name: str
    project_name_kebab: str
    project_path: Path
    package_manager: PackageManager
    directories: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    dependencies_installed: bool = False
    git_initialized: bool = False
    warnings: list[str] = Field(default_factory=list)

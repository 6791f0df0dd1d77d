"""create-tslib configuration.

Typed runtime settings for a scaffolding run.  Settings use Pydantic v2
models so they are validated at construction time and can be supplied
through environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class PackageManager(str, Enum):
    """JavaScript package managers the generated project can be set up with."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def install_command(self) -> list[str]:
        """Argument list that installs the project's dependencies."""
        return [self.value, "install"]

    @property
    def run_prefix(self) -> str:
        """Prefix used to invoke a ``package.json`` script."""
        if self is PackageManager.NPM:
            return "npm run"
        return self.value


_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


class Config(BaseModel):
    """Global create-tslib configuration.

    Instances are typically created once by the CLI entry point and handed to
    the ``ProjectGenerator``.
    """

    default_package_manager: PackageManager = Field(default=PackageManager.PNPM)
    install: bool = Field(
        default=True, description="Run the package manager install after generation"
    )
    git: bool = Field(default=True, description="Initialise a git repository")
    command_timeout: int = Field(
        default=600, ge=10, description="Per-command timeout in seconds"
    )
    template_dir: Path | None = Field(
        default=None, description="Override for the bundled template directory"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CREATE_TSLIB_PACKAGE_MANAGER, CREATE_TSLIB_INSTALL,
            CREATE_TSLIB_GIT, CREATE_TSLIB_COMMAND_TIMEOUT,
            CREATE_TSLIB_TEMPLATE_DIR.
        """
        kwargs: dict[str, Any] = {
            "install": _env_flag("CREATE_TSLIB_INSTALL", True),
            "git": _env_flag("CREATE_TSLIB_GIT", True),
        }
        if os.environ.get("CREATE_TSLIB_PACKAGE_MANAGER"):
            kwargs["default_package_manager"] = (
                os.environ["CREATE_TSLIB_PACKAGE_MANAGER"].strip().lower()
            )
        if os.environ.get("CREATE_TSLIB_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["CREATE_TSLIB_COMMAND_TIMEOUT"])
        if os.environ.get("CREATE_TSLIB_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CREATE_TSLIB_TEMPLATE_DIR"])

        return cls(**kwargs)

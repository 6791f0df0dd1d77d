"""External command execution for the post-generation steps.

The generator only needs to know whether ``pnpm install`` or ``git init``
worked; it never parses their output.  ``CommandRunner`` captures that
contract so tests can swap in a fake, and ``SubprocessCommandRunner`` is the
real implementation that lets the child process share the terminal.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from rich.markup import escape

from ..utils import format_command, print_warning, run_command


class CommandRunner(Protocol):
    """Runs an external command and reports success as a boolean."""

    async def run(self, command: list[str], cwd: Path) -> bool: ...


class SubprocessCommandRunner:
    """Spawn commands as child processes with inherited standard streams."""

    def __init__(self, timeout: int = 600) -> None:
        self.timeout = timeout

    async def run(self, command: list[str], cwd: Path) -> bool:
        """Run *command* inside *cwd* and wait for it to finish.

        Returns ``False`` when the executable cannot be spawned, when it exits
        with a non-zero status, or when it exceeds the timeout.
        """
        try:
            returncode, _, stderr = await run_command(
                command, cwd=cwd, timeout=self.timeout, capture=False
            )
        except OSError as exc:
            print_warning(f"  Could not start `{format_command(command)}`: {escape(str(exc))}")
            return False

        if returncode == -1 and stderr:
            print_warning(f"  {escape(stderr)}")
        return returncode == 0

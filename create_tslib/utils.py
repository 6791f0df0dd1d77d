"""Shared utility functions for create-tslib.

Provides the project-name normaliser, keyword parsing, async command
execution, and Rich-based console reporting shared by the prompter, the
scaffolder and the CLI.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------

_SEPARATOR_RUN = re.compile(r"[\s_.]+")
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_DISALLOWED = re.compile(r"[^a-z0-9-]")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def to_kebab_case(value: str) -> str:
    """Convert a free-form project name to a directory/package safe slug.

    Handles PascalCase, camelCase, snake_case, dotted and space separated
    input.  Interior runs of hyphens that were already present in *value*
    are kept as-is.

    Examples::

        to_kebab_case("My Cool App")       -> "my-cool-app"
        to_kebab_case("myCoolApp")         -> "my-cool-app"
        to_kebab_case("---Weird__Name...") -> "weird-name"
    """
    if not value:
        return ""

    result = _SEPARATOR_RUN.sub("-", value)
    result = _CASE_BOUNDARY.sub(r"\1-\2", result)
    result = _DISALLOWED.sub("", result.lower())
    return _EDGE_HYPHENS.sub("", result)


def to_pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s.]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def parse_keywords(raw: str | None) -> list[str]:
    """Split a comma separated keyword string, trimming and dropping empties.

    ``"a, b ,, c"`` -> ``["a", "b", "c"]``
    """
    if not raw:
        return []
    return [keyword.strip() for keyword in raw.split(",") if keyword.strip()]


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    timeout: int = 600,
    capture: bool = False,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Shell command string or list of arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        capture: Whether to capture stdout/stderr.  By default the child
            inherits the parent's streams so the user sees live output.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.  A timed-out process
        reports a return code of ``-1``.

    Raises:
        OSError: If the executable cannot be spawned.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    if isinstance(cmd, list):
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
        )
    else:
        process = await asyncio.create_subprocess_shell(
            cmd,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
        )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (
            -1,
            "",
            f"Command timed out after {timeout}s: {format_command(cmd)}",
        )

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


def format_command(cmd: str | list[str]) -> str:
    """Return *cmd* as it would be typed in a shell."""
    return cmd if isinstance(cmd, str) else " ".join(cmd)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_step(message: str) -> None:
    """Print a progress line with a green marker."""
    console.print(f"  [green]+[/green] {message}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")

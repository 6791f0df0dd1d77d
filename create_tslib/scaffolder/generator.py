"""Main scaffolding orchestrator.

Takes the answers collected from the user and generates a TypeScript library
project: a directory named after the project slug, the ``src``/``test``
skeleton, a fixed set of rendered files, and (best effort) installed
dependencies plus an initialised git repository.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import TemplateError
from rich.markup import escape
from rich.panel import Panel

from ..config import Config
from ..utils import (
    console,
    format_command,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)
from .commands import CommandRunner, SubprocessCommandRunner
from .models import AnswerRecord, ProjectSummary
from .prompts import InteractivePrompter, Prompter
from .templates import Renderer, TemplateRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Raised when a project cannot be generated."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class InvalidProjectNameError(GenerationError):
    """The project name does not produce a usable directory/package name."""


class ProjectExistsError(GenerationError):
    """The target directory is already present."""


class ProjectWriteError(GenerationError):
    """A directory or file could not be created, or a template failed."""


# ---------------------------------------------------------------------------
# Project layout
# ---------------------------------------------------------------------------


PROJECT_DIRECTORIES: list[str] = [
    "src",
    "src/core",
    "src/types",
    "src/utils",
    "test",
]

HELLO_TEST_PATTERN = """import { describe, expect, it } from "vitest";
import { hello } from "../src/main";

describe("hello", () => {
  it("returns the default greeting", () => {
    expect(hello()).toBe("Hello from {{ project_name }}!");
  });

  it("greets from a custom name", () => {
    expect(hello({ name: "Vitest" })).toBe("Hello from Vitest!");
  });
});
"""


@dataclass(frozen=True)
class ProjectFile:
    """One generated file.

    Exactly one of ``template`` or ``pattern`` is set for rendered files;
    neither is set for files written empty.  ``keys`` selects the subset of
    the answer context handed to the renderer.
    """

    path: str
    template: str | None = None
    pattern: str | None = None
    keys: tuple[str, ...] = ()


PROJECT_FILES: list[ProjectFile] = [
    ProjectFile(
        "package.json",
        template="package.json.j2",
        keys=(
            "project_name_kebab",
            "description",
            "author_name",
            "keywords",
            "repository_url",
        ),
    ),
    ProjectFile(
        "vite.config.ts",
        template="vite.config.ts.j2",
        keys=("library_name", "project_name_kebab"),
    ),
    ProjectFile(
        "src/core/index.ts",
        template="src/core/index.ts.j2",
        keys=("project_name",),
    ),
    ProjectFile(
        "src/types/index.ts",
        template="src/types/index.ts.j2",
        keys=("project_name",),
    ),
    ProjectFile(
        "README.md",
        template="README.md.j2",
        keys=(
            "project_name",
            "project_name_kebab",
            "description",
            "author_name",
            "keywords",
            "repository_url",
            "package_manager",
            "run_command",
        ),
    ),
    ProjectFile("tsconfig.json", template="tsconfig.json.j2"),
    ProjectFile("src/main.ts", template="src/main.ts.j2", keys=("project_name",)),
    ProjectFile("src/utils/.gitkeep"),
    ProjectFile("test/hello.test.ts", pattern=HELLO_TEST_PATTERN, keys=("project_name",)),
    ProjectFile(".gitignore", template="gitignore.j2"),
]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Every collaborator can be injected: the prompter that supplies the
    answers, the renderer that turns templates into text, and the runner
    that executes ``<pm> install`` and ``git``.  The working directory is
    always passed explicitly; the process-wide current directory is never
    changed.
    """

    def __init__(
        self,
        prompter: Prompter | None = None,
        renderer: Renderer | None = None,
        runner: CommandRunner | None = None,
        config: Config | None = None,
    ) -> None:
        self.config = config or Config.from_env()
        self.prompter = prompter or InteractivePrompter(
            default_package_manager=self.config.default_package_manager
        )
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.runner = runner or SubprocessCommandRunner(timeout=self.config.command_timeout)

    # -- Public API --------------------------------------------------------

    async def generate(self, working_dir: str | Path) -> ProjectSummary:
        """Ask for the project metadata and generate the project.

        The prompter blocks the event loop.  Terminal front ends call
        ``prompter.collect()`` before ``asyncio.run`` and then :meth:`create`
        so Ctrl-C reaches the prompt.

        Args:
            working_dir: Parent directory where the project folder will be
                created.

        Returns:
            Summary of what was created and which optional steps succeeded.

        Raises:
            GenerationError: When the project cannot be created.  Files
                written before the failure are left in place.
        """
        answers = self.prompter.collect()
        return await self.create(answers, working_dir)

    async def create(self, answers: AnswerRecord, working_dir: str | Path) -> ProjectSummary:
        """Generate the project described by *answers* inside *working_dir*."""
        self._announce(answers)

        slug = answers.project_name_kebab
        if not slug:
            raise InvalidProjectNameError(
                f'"{answers.project_name}" does not contain any letters or digits '
                "that can be used as a directory name"
            )

        project_root = Path(working_dir) / slug
        if project_root.exists():
            raise ProjectExistsError(f"The folder {project_root} already exists!", project_root)

        summary = ProjectSummary(
            project_name=answers.project_name,
            project_name_kebab=slug,
            project_path=project_root,
            package_manager=answers.package_manager,
        )

        # 1. Directory skeleton
        await self._create_directory_structure(project_root, summary)

        # 2. Project files, in a fixed order
        await self._write_files(project_root, answers, summary)

        # 3. Dependencies (best effort)
        await self._install_dependencies(project_root, answers, summary)

        # 4. Git repository (best effort)
        await self._init_git(project_root, summary)

        self._print_summary(summary)
        return summary

    # -- Context building --------------------------------------------------

    @staticmethod
    def _build_context(answers: AnswerRecord, keys: tuple[str, ...]) -> dict[str, Any]:
        """Select the template variables a single file is rendered with."""
        full = answers.template_context()
        return {key: full[key] for key in keys}

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path, summary: ProjectSummary) -> None:
        """Create the project root and the mandatory subdirectories."""
        try:
            await asyncio.to_thread(root.mkdir)
        except FileExistsError as exc:
            raise ProjectExistsError(
                f"The folder {root} already exists!", root
            ) from exc
        except OSError as exc:
            raise ProjectWriteError(f"Could not create {root}: {exc}", root) from exc

        for directory in PROJECT_DIRECTORIES:
            path = root / directory
            try:
                await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
            except OSError as exc:
                raise ProjectWriteError(f"Could not create {path}: {exc}", path) from exc
            summary.directories.append(directory)

        print_step(f"Created {escape(summary.project_name_kebab)}/ and its src/ and test/ folders")

    # -- File rendering ----------------------------------------------------

    async def _write_files(
        self, root: Path, answers: AnswerRecord, summary: ProjectSummary
    ) -> None:
        """Render every entry of ``PROJECT_FILES`` and write it below *root*."""
        for project_file in PROJECT_FILES:
            content = self._render_file(project_file, answers)
            destination = root / project_file.path
            try:
                await asyncio.to_thread(_write_file, destination, content)
            except OSError as exc:
                raise ProjectWriteError(
                    f"Could not write {project_file.path}: {exc}", destination
                ) from exc
            summary.files.append(project_file.path)
            print_step(f"Wrote {project_file.path}")

    def _render_file(self, project_file: ProjectFile, answers: AnswerRecord) -> str:
        if project_file.template is None and project_file.pattern is None:
            return ""

        context = self._build_context(answers, project_file.keys)
        try:
            if project_file.template is not None:
                return self.renderer.render(project_file.template, context)
            return self.renderer.render_string(project_file.pattern, context)
        except (TemplateError, OSError) as exc:
            source = project_file.template or "inline pattern"
            raise ProjectWriteError(
                f"Could not render {project_file.path} from {source}: {exc}"
            ) from exc

    # -- Best-effort steps -------------------------------------------------

    async def _install_dependencies(
        self, root: Path, answers: AnswerRecord, summary: ProjectSummary
    ) -> None:
        """Run the package manager's install command inside the new project."""
        if not self.config.install:
            print_step("Skipping dependency installation")
            return

        command = answers.package_manager.install_command
        console.print(
            f"\n[cyan]Installing dependencies with {answers.package_manager.value}...[/cyan]"
        )
        if await self.runner.run(command, root):
            summary.dependencies_installed = True
            print_success("Dependencies installed.")
            return

        message = (
            "Failed to install dependencies. You can install them manually with: "
            f"cd {summary.project_name_kebab} && {format_command(command)}"
        )
        summary.warnings.append(message)
        print_warning(escape(message))

    async def _init_git(self, root: Path, summary: ProjectSummary) -> None:
        """Initialise a git repository and stage the generated files."""
        if not self.config.git:
            print_step("Skipping git initialisation")
            return

        console.print("\n[cyan]Initializing git repository...[/cyan]")
        for command in (["git", "init"], ["git", "add", "."]):
            if not await self.runner.run(command, root):
                message = (
                    f"`{format_command(command)}` failed. You can set up git manually with: "
                    f"cd {summary.project_name_kebab} && git init && git add ."
                )
                summary.warnings.append(message)
                print_warning(escape(message))
                return

        summary.git_initialized = True
        print_success("Git repository initialized.")

    # -- Reporting ---------------------------------------------------------

    def _announce(self, answers: AnswerRecord) -> None:
        """Echo the collected answers back to the user."""
        console.print(
            f"\n[green]Creating a new project with name: "
            f"[bold]{escape(answers.project_name)}[/bold][/green]"
        )
        if answers.project_name != answers.project_name_kebab and answers.project_name_kebab:
            console.print(
                f'[yellow]Using "[bold]{escape(answers.project_name_kebab)}[/bold]" '
                "as the directory and package name[/yellow]"
            )
        if answers.author_name:
            console.print(f"[green]Author: [bold]{escape(answers.author_name)}[/bold][/green]")
        if answers.description:
            console.print(f"[green]Description: {escape(answers.description)}[/green]")
        if answers.keywords:
            console.print(f"[green]Keywords: {escape(', '.join(answers.keywords))}[/green]")
        if answers.repository_url:
            console.print(f"[green]Repository: {escape(answers.repository_url)}[/green]")
        console.print(f"[green]Package manager: {answers.package_manager.value}[/green]")

    def _print_summary(self, summary: ProjectSummary) -> None:
        """Print the final success panel and next-step instructions."""
        run = summary.package_manager.run_prefix
        steps = [f"cd {summary.project_name_kebab}"]
        if not summary.dependencies_installed:
            steps.append(format_command(summary.package_manager.install_command))
        steps += [f"{run} dev", f"{run} test", f"{run} build"]

        console.print()
        console.print(
            Panel(
                f"[bold green]Success![/bold green] Created "
                f"[bold]{escape(summary.project_name)}[/bold] at "
                f"{escape(str(summary.project_path))}",
                title="[bold]Project Ready[/bold]",
                border_style="green",
            )
        )
        print_summary_table(
            {
                "Directory": str(summary.project_path),
                "Package name": summary.project_name_kebab,
                "Files written": str(len(summary.files)),
                "Dependencies": "installed" if summary.dependencies_installed else "not installed",
                "Git": "initialized" if summary.git_initialized else "not initialized",
                "Warnings": str(len(summary.warnings)),
            },
            title="Generation Results",
        )
        console.print("[bold]Next steps:[/bold]")
        for step in steps:
            console.print(f"  [cyan]{escape(step)}[/cyan]")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")

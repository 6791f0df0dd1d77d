"""Interactive question flow for a new library.

Asks for the project metadata one question at a time using ``rich.prompt``
and returns a validated ``AnswerRecord``.  An invalid project name is
reported and asked again; it never reaches the generator.
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from ..config import PackageManager
from ..utils import console as default_console
from ..utils import parse_keywords
from .models import AnswerRecord, check_project_name


DEFAULT_PROJECT_NAME = "my-app"


class Prompter(Protocol):
    """Provides the answers for one generation run."""

    def collect(self) -> AnswerRecord: ...


class InteractivePrompter:
    """Collect answers from the terminal.

    Args:
        console: Rich console used for both questions and feedback.
        default_package_manager: Pre-selected package manager choice.
    """

    def __init__(
        self,
        console: Console | None = None,
        default_package_manager: PackageManager = PackageManager.PNPM,
    ) -> None:
        self.console = console or default_console
        self.default_package_manager = default_package_manager

    def collect(self) -> AnswerRecord:
        self.console.print(
            Panel("[bold blue]Welcome to the project setup wizard![/bold blue]", style="blue")
        )

        project_name = self._ask_project_name()
        author_name = self._ask("What is your name (author)?")
        description = self._ask("Project description:")
        keywords = parse_keywords(self._ask("Keywords (comma separated):"))
        repository_url = self._ask("Repository URL:")
        package_manager = Prompt.ask(
            "Which package manager do you want to use?",
            console=self.console,
            choices=[pm.value for pm in PackageManager],
            default=self.default_package_manager.value,
        )

        return AnswerRecord(
            project_name=project_name,
            author_name=author_name,
            description=description,
            keywords=keywords,
            repository_url=repository_url,
            package_manager=PackageManager(package_manager),
        )

    def _ask(self, question: str, default: str = "") -> str:
        answer = Prompt.ask(
            question, console=self.console, default=default, show_default=bool(default)
        )
        return (answer or "").strip()

    def _ask_project_name(self) -> str:
        while True:
            answer = self._ask("What is your project name?", default=DEFAULT_PROJECT_NAME)
            error = check_project_name(answer)
            if error is None:
                return answer
            self.console.print(f"[red]>> {error}[/red]")

"""Command line entry point for ``create-tslib``.

Usage::

    create-tslib
    python -m create_tslib
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from create_tslib import __version__
from create_tslib.config import Config
from create_tslib.scaffolder import GenerationError, ProjectGenerator
from create_tslib.utils import console, print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-tslib",
        description=(
            "Create a new TypeScript library project. "
            "Answers are collected interactively."
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-tslib``.

    Prompts run before ``asyncio.run``: its SIGINT handler cannot interrupt
    a blocking ``input()``.
    """
    build_parser().parse_args(argv)

    try:
        config = Config.from_env()
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        sys.exit(1)

    generator = ProjectGenerator(config=config)
    try:
        answers = generator.prompter.collect()
        asyncio.run(generator.create(answers, Path.cwd()))
    except GenerationError as exc:
        print_error(escape(str(exc)))
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[bold red]Aborted.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    main()

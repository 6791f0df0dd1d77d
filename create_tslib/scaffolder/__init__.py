"""create-tslib scaffolder -- generates TypeScript library projects.

This module collects project metadata (or accepts a ready ``AnswerRecord``)
and renders a Vite + Vitest library skeleton into a new directory named after
the project.

Quick usage::

    from create_tslib.scaffolder import AnswerRecord, ProjectGenerator

    answers = AnswerRecord(project_name="My Cool Lib", keywords="ts, lib")
    generator = ProjectGenerator()
    summary = await generator.create(answers, "/tmp/output")
"""

from create_tslib.scaffolder.commands import CommandRunner, SubprocessCommandRunner
from create_tslib.scaffolder.generator import (
    GenerationError,
    InvalidProjectNameError,
    ProjectExistsError,
    ProjectGenerator,
    ProjectWriteError,
)
from create_tslib.scaffolder.models import AnswerRecord, ProjectSummary
from create_tslib.scaffolder.prompts import InteractivePrompter
from create_tslib.scaffolder.templates import TemplateRenderer

__all__ = [
    "AnswerRecord",
    "CommandRunner",
    "GenerationError",
    "InteractivePrompter",
    "InvalidProjectNameError",
    "ProjectExistsError",
    "ProjectGenerator",
    "ProjectSummary",
    "ProjectWriteError",
    "SubprocessCommandRunner",
    "TemplateRenderer",
]

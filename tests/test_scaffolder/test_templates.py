"""Tests for the Jinja2 TemplateRenderer and the bundled templates."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from create_tslib.scaffolder.generator import PROJECT_FILES
from create_tslib.scaffolder.models import AnswerRecord
from create_tslib.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestRenderer:
    def test_render_string(self, renderer: TemplateRenderer):
        assert renderer.render_string("Hello {{ name }}", {"name": "world"}) == "Hello world"

    def test_undefined_variable_raises(self, renderer: TemplateRenderer):
        with pytest.raises(UndefinedError):
            renderer.render_string("{{ missing }}", {})

    def test_missing_template_raises(self, renderer: TemplateRenderer):
        with pytest.raises(TemplateNotFound):
            renderer.render("nope.j2", {})

    def test_no_html_escaping(self, renderer: TemplateRenderer):
        rendered = renderer.render_string("{{ name }}", {"name": "Tom & <Jerry's> \"lib\""})
        assert rendered == "Tom & <Jerry's> \"lib\""

    def test_no_html_escaping_in_files(self, tmp_path: Path):
        (tmp_path / "name.txt.j2").write_text("{{ name }}", encoding="utf-8")
        rendered = TemplateRenderer(tmp_path).render("name.txt.j2", {"name": "a & <b>"})
        assert rendered == "a & <b>"

    def test_keeps_trailing_newline(self, renderer: TemplateRenderer):
        assert renderer.render_string("x\n", {}) == "x\n"

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "greet.txt.j2").write_text("Hi {{ who }}", encoding="utf-8")
        assert TemplateRenderer(tmp_path).render("greet.txt.j2", {"who": "you"}) == "Hi you"

    def test_bundled_templates_match_project_files(self, renderer: TemplateRenderer):
        bundled = {
            p.relative_to(renderer.template_dir).as_posix()
            for p in renderer.template_dir.rglob("*.j2")
        }
        referenced = {f.template for f in PROJECT_FILES if f.template}
        assert referenced == bundled


class TestBundledTemplates:
    def _render(self, renderer: TemplateRenderer, path: str, answers: AnswerRecord) -> str:
        project_file = next(f for f in PROJECT_FILES if f.path == path)
        full = answers.template_context()
        return renderer.render(project_file.template, {k: full[k] for k in project_file.keys})

    def test_tsconfig_is_valid_json(self, renderer: TemplateRenderer, sample_answers):
        data = json.loads(self._render(renderer, "tsconfig.json", sample_answers))
        assert data["compilerOptions"]["strict"] is True
        assert data["include"] == ["src", "test"]

    def test_core_greets_with_display_name(self, renderer: TemplateRenderer, sample_answers):
        content = self._render(renderer, "src/core/index.ts", sample_answers)
        assert 'LIBRARY_NAME = "My Cool App"' in content
        assert "export function hello" in content

    def test_main_reexports_modules(self, renderer: TemplateRenderer, sample_answers):
        content = self._render(renderer, "src/main.ts", sample_answers)
        assert 'export * from "./core";' in content
        assert 'from "./types";' in content

    def test_readme_lists_metadata(self, renderer: TemplateRenderer, sample_answers):
        content = self._render(renderer, "README.md", sample_answers)
        assert content.startswith("# My Cool App\n")
        assert "A tiny library that says hello." in content
        assert "pnpm add my-cool-app" in content
        assert "pnpm test" in content
        assert "- typescript" in content
        assert "https://github.com/example/my-cool-app" in content
        assert "MIT © Jane Doe" in content

    def test_readme_for_npm_minimal(self, renderer: TemplateRenderer):
        answers = AnswerRecord(project_name="bare", package_manager="npm")
        content = self._render(renderer, "README.md", answers)
        assert "npm install bare" in content
        assert "npm run dev" in content
        assert "## Keywords" not in content
        assert "## Repository" not in content

    def test_gitignore_ignores_build_output(self, renderer: TemplateRenderer, sample_answers):
        content = self._render(renderer, ".gitignore", sample_answers)
        assert "node_modules/" in content
        assert "dist/" in content

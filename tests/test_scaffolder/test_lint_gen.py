"""Tests for the Prettier step (vitekit.scaffolder.lint_gen)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vitekit.choices import Framework
from vitekit.scaffolder.lint_gen import (
    FORMAT_SCRIPTS,
    LintGenerator,
    merge_scripts,
    prettier_config,
)
from vitekit.scaffolder.steps import OutcomeKind

pytestmark = pytest.mark.unit


@pytest.fixture
def step(renderer) -> LintGenerator:
    return LintGenerator(renderer)


class TestMergeScripts:
    def test_adds_missing_scripts(self, tmp_path: Path):
        manifest = tmp_path / "package.json"
        manifest.write_text(json.dumps({"name": "x", "scripts": {"dev": "vite"}}))

        added = merge_scripts(manifest, FORMAT_SCRIPTS)

        assert added == ["format", "format:check"]
        scripts = json.loads(manifest.read_text())["scripts"]
        assert scripts == {"dev": "vite", **FORMAT_SCRIPTS}

    def test_never_replaces_existing_scripts(self, tmp_path: Path):
        manifest = tmp_path / "package.json"
        manifest.write_text(json.dumps({"scripts": {"format": "biome format"}}))

        added = merge_scripts(manifest, FORMAT_SCRIPTS)

        assert added == ["format:check"]
        assert json.loads(manifest.read_text())["scripts"]["format"] == "biome format"

    def test_creates_scripts_section(self, tmp_path: Path):
        manifest = tmp_path / "package.json"
        manifest.write_text('{"name": "x"}')
        merge_scripts(manifest, {"format": "prettier --write ."})
        assert json.loads(manifest.read_text())["scripts"] == {"format": "prettier --write ."}

    def test_nothing_added_leaves_file_alone(self, tmp_path: Path):
        manifest = tmp_path / "package.json"
        original = '{"scripts":{"format":"a","format:check":"b"}}'
        manifest.write_text(original)
        assert merge_scripts(manifest, FORMAT_SCRIPTS) == []
        assert manifest.read_text() == original

    def test_null_scripts_section_is_replaced(self, tmp_path: Path):
        manifest = tmp_path / "package.json"
        manifest.write_text('{"name": "x", "scripts": null}')
        assert merge_scripts(manifest, FORMAT_SCRIPTS) == ["format", "format:check"]
        assert json.loads(manifest.read_text())["scripts"] == FORMAT_SCRIPTS

    @pytest.mark.parametrize("scripts", ['"vite"', '["dev"]', "3"])
    def test_non_object_scripts_raises(self, tmp_path: Path, scripts: str):
        manifest = tmp_path / "package.json"
        original = '{"name": "x", "scripts": ' + scripts + "}"
        manifest.write_text(original)
        with pytest.raises(ValueError, match="scripts"):
            merge_scripts(manifest, FORMAT_SCRIPTS)
        assert manifest.read_text() == original

    @pytest.mark.parametrize("document", ["[]", "null", '"x"'])
    def test_non_object_manifest_raises(self, tmp_path: Path, document: str):
        manifest = tmp_path / "package.json"
        manifest.write_text(document)
        with pytest.raises(ValueError, match="JSON object"):
            merge_scripts(manifest, FORMAT_SCRIPTS)
        assert manifest.read_text() == document


class TestPrettierConfig:
    def test_svelte_gets_plugin(self):
        assert prettier_config(Framework.SVELTE)["plugins"] == ["prettier-plugin-svelte"]

    def test_react_has_no_plugins(self):
        config = prettier_config(Framework.REACT)
        assert "plugins" not in config
        assert config["singleQuote"] is True


class TestLintGenerator:
    @pytest.mark.asyncio
    async def test_react_setup(self, step, make_context, fake_runner):
        ctx = make_context("react", "typescript", ("linting",))
        outcome = await step.run(ctx)

        assert outcome.kind is OutcomeKind.SUCCESS
        assert fake_runner.commands == ["npm install -D prettier@latest"]
        assert json.loads(ctx.path(".prettierrc").read_text())["semi"] is False
        assert "dist" in ctx.path(".prettierignore").read_text()

        manifest = json.loads(ctx.path("package.json").read_text())
        assert manifest["scripts"]["format"] == "prettier --write ."
        assert manifest["scripts"]["dev"] == "vite"
        assert "format, format:check" in outcome.message

    @pytest.mark.asyncio
    async def test_svelte_installs_plugin(self, step, make_context, fake_runner):
        ctx = make_context("svelte", "javascript", ("linting",))
        await step.run(ctx)
        assert fake_runner.commands == [
            "npm install -D prettier@latest prettier-plugin-svelte@latest"
        ]

    @pytest.mark.asyncio
    async def test_unparseable_manifest_is_a_warning(self, step, make_context):
        ctx = make_context("react", "javascript", ("linting",))
        ctx.path("package.json").write_text("{broken")
        outcome = await step.run(ctx)

        assert outcome.kind is OutcomeKind.WARNING
        assert "package.json scripts could not be updated" in outcome.message
        assert ctx.path(".prettierrc").exists()

    @pytest.mark.asyncio
    async def test_install_failure_is_a_warning(self, step, make_context, make_runner):
        ctx = make_context(
            "react", "javascript", ("linting",), runner=make_runner(fail_on={"prettier": 1})
        )
        outcome = await step.run(ctx)
        assert outcome.kind is OutcomeKind.WARNING
        assert outcome.hint
        assert not ctx.path(".prettierrc").exists()

    @pytest.mark.asyncio
    async def test_non_object_scripts_is_a_warning(self, step, make_context):
        ctx = make_context("vue", "typescript", ("linting",))
        original = '{"name": "x", "scripts": "vite"}'
        ctx.path("package.json").write_text(original)
        outcome = await step.run(ctx)

        assert outcome.kind is OutcomeKind.WARNING
        assert '"scripts" in package.json must be an object' in outcome.message
        assert outcome.hint
        assert ctx.path("package.json").read_text() == original
        assert ctx.path(".prettierrc").exists()

    @pytest.mark.asyncio
    async def test_array_manifest_is_a_warning(self, step, make_context):
        ctx = make_context("react", "typescript", ("linting",))
        ctx.path("package.json").write_text("[]")
        outcome = await step.run(ctx)

        assert outcome.kind is OutcomeKind.WARNING
        assert "must hold a JSON object" in outcome.message
        assert ctx.path("package.json").read_text() == "[]"

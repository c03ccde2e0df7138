"""Tests for the environment-files step (vitekit.scaffolder.env_gen)."""

from __future__ import annotations

from pathlib import Path

import pytest

from vitekit.scaffolder.env_gen import ENV_IGNORE_RULE, EnvGenerator, ensure_ignore_rule
from vitekit.scaffolder.steps import OutcomeKind

pytestmark = pytest.mark.unit


class TestEnsureIgnoreRule:
    def test_appends_rule(self, tmp_path: Path):
        gitignore = tmp_path / ".gitignore"
        gitignore.write_text("node_modules\ndist\n")

        assert ensure_ignore_rule(gitignore) is True
        assert gitignore.read_text() == "node_modules\ndist\n\n# Local environment\n.env\n"

    def test_is_idempotent(self, tmp_path: Path):
        gitignore = tmp_path / ".gitignore"
        gitignore.write_text("node_modules\n")
        ensure_ignore_rule(gitignore)
        once = gitignore.read_text()

        assert ensure_ignore_rule(gitignore) is False
        assert gitignore.read_text() == once
        assert once.count(ENV_IGNORE_RULE + "\n") == 1

    def test_existing_rule_detected(self, tmp_path: Path):
        gitignore = tmp_path / ".gitignore"
        gitignore.write_text("node_modules\n  .env  \n")
        assert ensure_ignore_rule(gitignore) is False

    def test_similar_rule_is_not_a_match(self, tmp_path: Path):
        gitignore = tmp_path / ".gitignore"
        gitignore.write_text(".env.local\n")
        assert ensure_ignore_rule(gitignore) is True

    def test_missing_trailing_newline(self, tmp_path: Path):
        gitignore = tmp_path / ".gitignore"
        gitignore.write_text("node_modules")
        ensure_ignore_rule(gitignore)
        assert gitignore.read_text() == "node_modules\n\n# Local environment\n.env\n"

    def test_creates_missing_file(self, tmp_path: Path):
        gitignore = tmp_path / ".gitignore"
        assert ensure_ignore_rule(gitignore) is True
        assert gitignore.read_text() == "# Local environment\n.env\n"


class TestEnvGenerator:
    @pytest.mark.asyncio
    async def test_writes_env_files(self, renderer, make_context):
        ctx = make_context("vue", "javascript", ("env_files",))
        outcome = await EnvGenerator(renderer).run(ctx)

        assert outcome.kind is OutcomeKind.SUCCESS
        env = ctx.path(".env").read_text()
        assert "VITE_APP_TITLE=demo-app" in env
        assert "VITE_API_URL=http://localhost:3000/api" in env
        assert ctx.path(".env.example").read_text() == env
        assert ".env" in ctx.path(".gitignore").read_text().splitlines()
        assert ctx.path(".gitignore") in outcome.files

    @pytest.mark.asyncio
    async def test_running_twice_keeps_one_rule(self, renderer, make_context):
        ctx = make_context("react", "typescript", ("env_files",))
        step = EnvGenerator(renderer)
        await step.run(ctx)
        second = await step.run(ctx)

        lines = ctx.path(".gitignore").read_text().splitlines()
        assert lines.count(".env") == 1
        assert ctx.path(".gitignore") not in second.files

"""``.env`` / ``.env.example`` files and the matching ``.gitignore`` rule."""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..choices import Feature
from .steps import StepContext, StepOutcome, TemplateStep

ENV_IGNORE_RULE = ".env"


def ensure_ignore_rule(gitignore: Path, rule: str = ENV_IGNORE_RULE) -> bool:
    """Append *rule* to *gitignore* unless a line already equals it.

    The file is created when missing.  Returns ``True`` if the rule was
    appended.
    """
    content = gitignore.read_text(encoding="utf-8") if gitignore.exists() else ""
    if rule in (line.strip() for line in content.splitlines()):
        return False

    if content and not content.endswith("\n"):
        content += "\n"
    if content:
        content += "\n"
    content += f"# Local environment\n{rule}\n"
    gitignore.write_text(content, encoding="utf-8")
    return True


class EnvGenerator(TemplateStep):
    """Writes default environment files and keeps ``.env`` out of git."""

    name = "env_files"
    title = "Environment files"
    feature = Feature.ENV_FILES

    async def execute(self, ctx: StepContext) -> StepOutcome:
        context = ctx.template_context()
        written = []
        for output_name in (".env", ".env.example"):
            written.append(
                await self.renderer.render_to_file("env/env.j2", ctx.path(output_name), context)
            )

        gitignore = ctx.path(".gitignore")
        appended = await asyncio.to_thread(ensure_ignore_rule, gitignore)
        if appended:
            written.append(gitignore)

        return StepOutcome.success(self.name, "Created .env and .env.example", files=written)

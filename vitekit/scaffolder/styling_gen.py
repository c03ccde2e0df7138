"""Tailwind CSS setup.

Installs Tailwind with PostCSS and Autoprefixer, writes
``tailwind.config.js`` and ``postcss.config.js``, and replaces the primary
stylesheet with the Tailwind directives.
"""

from __future__ import annotations

import asyncio

from ..choices import Feature
from ..resolver import STYLESHEET_CANDIDATES, STYLESHEET_FALLBACK
from ..utils import first_existing, write_file
from .steps import StepContext, StepOutcome, TemplateStep

# Tailwind 4 dropped ``tailwind.config.js`` content scanning and the
# ``@tailwind`` directives, so the generated config pins the 3.x line.
STYLING_PACKAGES: list[str] = ["tailwindcss@^3", "postcss@latest", "autoprefixer@latest"]

TAILWIND_DIRECTIVES = "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n"


class StylingGenerator(TemplateStep):
    """Configures Tailwind CSS in the generated project."""

    name = "styling"
    title = "Tailwind CSS setup"
    feature = Feature.STYLING
    hint = "You can set up Tailwind manually later with: npx tailwindcss init -p"

    _CONFIG_FILES: dict[str, str] = {
        "styling/tailwind.config.js.j2": "tailwind.config.js",
        "styling/postcss.config.js.j2": "postcss.config.js",
    }

    async def execute(self, ctx: StepContext) -> StepOutcome:
        await ctx.runner.check(
            ctx.package_manager.add_command(STYLING_PACKAGES, dev=True), ctx.project_root
        )

        context = ctx.template_context()
        written = []
        for template_name, output_name in self._CONFIG_FILES.items():
            path = await self.renderer.render_to_file(
                template_name, ctx.path(output_name), context
            )
            written.append(path)

        stylesheet = first_existing(ctx.project_root, STYLESHEET_CANDIDATES, STYLESHEET_FALLBACK)
        await asyncio.to_thread(write_file, stylesheet, TAILWIND_DIRECTIVES)
        ctx.claim(stylesheet, self.name)
        written.append(stylesheet)

        return StepOutcome.success(
            self.name,
            f"Tailwind CSS configured ({ctx.relative(stylesheet)})",
            files=written,
        )

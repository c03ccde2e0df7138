"""Organized ``src/`` folder layout.

Component-and-page frameworks get ``components/pages/hooks/assets``; vue
uses its own vocabulary (views, composables) and svelte its own (routes,
stores).  Each folder gets a short README explaining what belongs there.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..choices import Feature, Framework
from .steps import StepContext, StepOutcome, TemplateStep

_DEFAULT_FOLDERS = ["components", "pages", "hooks", "assets"]

FOLDER_SETS: dict[Framework, list[str]] = {
    Framework.REACT: _DEFAULT_FOLDERS,
    Framework.VUE: ["components", "views", "composables", "assets"],
    Framework.SVELTE: ["components", "routes", "stores", "assets"],
    Framework.PREACT: _DEFAULT_FOLDERS,
    Framework.LIT: _DEFAULT_FOLDERS,
    Framework.VANILLA: _DEFAULT_FOLDERS,
}

FOLDER_DESCRIPTIONS: dict[str, str] = {
    "components": "Put your reusable components here!",
    "pages": "Put your page/route components here!",
    "views": "Put your page/route components here!",
    "routes": "Put your page/route components here!",
    "hooks": "Put your custom hooks/composables here!",
    "composables": "Put your custom hooks/composables here!",
    "stores": "Put your Svelte stores here!",
    "assets": "Put your images, fonts, and other files here!",
}


class StructureGenerator(TemplateStep):
    """Creates the framework's folder layout under ``src/``."""

    name = "folder_structure"
    title = "Folder structure"
    feature = Feature.FOLDER_STRUCTURE

    async def execute(self, ctx: StepContext) -> StepOutcome:
        context = ctx.template_context()
        folders = FOLDER_SETS[ctx.choices.framework]
        written: list[Path] = []
        for folder in folders:
            folder_path = ctx.path(f"src/{folder}")
            await asyncio.to_thread(folder_path.mkdir, parents=True, exist_ok=True)
            readme = await self.renderer.render_to_file(
                "structure/README.md.j2",
                folder_path / "README.md",
                {**context, "folder": folder, "folder_description": FOLDER_DESCRIPTIONS[folder]},
            )
            written.append(readme)

        return StepOutcome.success(
            self.name, f"Created src/{{{','.join(folders)}}}", files=written
        )

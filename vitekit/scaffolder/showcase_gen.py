"""Showcase content for the generated project.

Replaces the root component with a small demo page listing the chosen
stack, and the primary stylesheet with example styles and keyframe
animations.  The templates are router- and Tailwind-aware, so they carry
forward what the routing and styling steps set up in the same files.
"""

from __future__ import annotations

from pathlib import Path

from ..choices import Feature, Framework
from ..resolver import STYLESHEET_CANDIDATES, STYLESHEET_FALLBACK
from ..utils import first_existing
from .steps import StepContext, StepOutcome, TemplateStep

SHOWCASE_TEMPLATES: dict[Framework, str] = {
    Framework.REACT: "showcase/react.j2",
    Framework.PREACT: "showcase/preact.j2",
    Framework.VUE: "showcase/vue.j2",
    Framework.SVELTE: "showcase/svelte.j2",
}

# Earlier steps whose edits the showcase templates reproduce.
CARRIED_STEPS: tuple[str, ...] = ("routing", "styling")


class ShowcaseGenerator(TemplateStep):
    """Writes example markup and styles demonstrating the selected features."""

    name = "showcase"
    title = "Showcase content"
    feature = Feature.SHOWCASE

    async def execute(self, ctx: StepContext) -> StepOutcome:
        template = SHOWCASE_TEMPLATES.get(ctx.choices.framework)
        root_component = ctx.binding.root_component
        if template is None or root_component is None:
            return StepOutcome.skipped(self.name)

        context = ctx.template_context()
        # Router links and Tailwind classes only appear when the step that
        # sets them up finished cleanly.
        context["router"] = context["router"] and "routing" in ctx.completed
        context["styling"] = context["styling"] and "styling" in ctx.completed
        component = ctx.path(root_component)
        stylesheet = first_existing(ctx.project_root, STYLESHEET_CANDIDATES, STYLESHEET_FALLBACK)

        conflicts = [
            (path, ctx.claim(path, self.name, carries=CARRIED_STEPS))
            for path in (component, stylesheet)
        ]

        written: list[Path] = [
            await self.renderer.render_to_file(template, component, context),
            await self.renderer.render_to_file(
                "showcase/styles.css.j2",
                stylesheet,
                {**context, "stylesheet": ctx.relative(stylesheet)},
            ),
        ]

        lost = [f"{ctx.relative(path)} (from {step})" for path, step in conflicts if step]
        if lost:
            return StepOutcome.warning(
                self.name,
                f"Showcase content replaced earlier changes to {', '.join(lost)}",
                hint="Re-apply those changes by hand if you need them",
                files=written,
            )
        return StepOutcome.success(
            self.name,
            f"Example content written to {root_component}",
            files=written,
        )

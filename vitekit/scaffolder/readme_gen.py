"""Project README generation."""

from __future__ import annotations

from .steps import StepContext, StepOutcome, TemplateStep


class ReadmeGenerator(TemplateStep):
    """Overwrites the scaffold's README with one describing the chosen stack."""

    name = "readme"
    title = "README"
    mandatory = True

    async def execute(self, ctx: StepContext) -> StepOutcome:
        context = ctx.template_context()
        context["router_ready"] = "routing" in ctx.completed
        path = await self.renderer.render_to_file("README.md.j2", ctx.path("README.md"), context)
        return StepOutcome.success(self.name, "README.md written", files=[path])

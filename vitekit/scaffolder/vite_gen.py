"""The two mandatory steps: run create-vite, then install dependencies."""

from __future__ import annotations

from .steps import Step, StepContext, StepOutcome


class ScaffoldGenerator(Step):
    """Create the project with create-vite.

    The generator runs in ``config.output_dir`` and shares the terminal so
    any question create-vite asks reaches the user.  A non-zero exit is
    fatal; whatever the generator left behind stays on disk.
    """

    name = "scaffold"
    title = "Project scaffold"
    mandatory = True

    async def execute(self, ctx: StepContext) -> StepOutcome:
        if ctx.project_root.exists():
            return StepOutcome.fatal(
                self.name, f"Directory already exists: {ctx.project_root}"
            )

        cmd = ctx.package_manager.create_command(
            ctx.choices.project_name, ctx.binding.template_id
        )
        await ctx.runner.check(cmd, ctx.config.output_dir, interactive=True)

        if not ctx.project_root.is_dir():
            return StepOutcome.fatal(
                self.name,
                f"{' '.join(cmd)} exited cleanly but did not create {ctx.project_root}",
            )
        return StepOutcome.success(
            self.name,
            f"{ctx.choices.info.label} project created from template "
            f"{ctx.binding.template_id}",
        )


class InstallGenerator(Step):
    """Install the dependencies declared in the scaffold's ``package.json``."""

    name = "install"
    title = "Dependency installation"
    mandatory = True

    async def execute(self, ctx: StepContext) -> StepOutcome:
        await ctx.runner.check(ctx.package_manager.install_command(), ctx.project_root)
        return StepOutcome.success(self.name, "Dependencies installed")

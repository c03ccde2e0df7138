"""Router installation and wiring.

Installs the framework's router package.  For react and vue the step also
writes ``src/router/index.<ext>`` and patches the generated entry files so
the router is actually mounted; svelte-routing is component based and is
only installed.  When a patch rule no longer matches the scaffold the
package stays installed and the step reports a warning.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from ..choices import ChoiceModel, Feature, Framework
from ..resolver import resolve_router_package
from .patcher import PatchResult, PatchRule, patch_files
from .steps import StepContext, StepOutcome, TemplateStep


@dataclass(frozen=True)
class RouterWiring:
    """Files rendered and patches applied to mount a router."""

    # template -> output path, relative to the project root; ``{ext}`` is
    # replaced by the resolved file extension
    files: dict[str, str]
    # "entry" / "root" (resolved per language) or a literal path -> rules
    patches: dict[str, list[PatchRule]]


_REACT_WIRING = RouterWiring(
    files={"router/react.j2": "src/router/index.{ext}"},
    patches={
        "entry": [
            PatchRule(
                description="replace the App import with the router imports",
                pattern=r"""^import App from ['"]\./App(?:\.[jt]sx)?['"];?[ \t]*$""",
                replacement=(
                    "import { RouterProvider } from 'react-router-dom'\n"
                    "import { router } from './router'"
                ),
            ),
            PatchRule(
                description="render <RouterProvider> instead of <App />",
                pattern=r"<App\s*/>",
                replacement="<RouterProvider router={router} />",
            ),
        ],
    },
)

_VUE_WIRING = RouterWiring(
    files={
        "router/vue.j2": "src/router/index.{ext}",
        "router/HomeView.vue.j2": "src/views/HomeView.vue",
    },
    patches={
        "entry": [
            PatchRule(
                description="import the router after the App import",
                pattern=r"""^import App from ['"]\./App\.vue['"];?[ \t]*$""",
                replacement="\\g<0>\nimport router from './router'",
            ),
            PatchRule(
                description="install the router on the app",
                pattern=r"createApp\(App\)\.mount\(",
                replacement="createApp(App).use(router).mount(",
            ),
        ],
        "root": [
            PatchRule(
                description="render <RouterView /> in App.vue",
                pattern=r"<HelloWorld\b[^>]*/>",
                replacement="<RouterView />",
            ),
            PatchRule(
                description="drop the HelloWorld import from App.vue",
                pattern=r"""^import HelloWorld from ['"]\./components/HelloWorld\.vue['"];?[ \t]*\n""",
                replacement="",
                required=False,
            ),
        ],
    },
)

ROUTER_WIRING: dict[Framework, RouterWiring] = {
    Framework.REACT: _REACT_WIRING,
    Framework.VUE: _VUE_WIRING,
}


class RouterGenerator(TemplateStep):
    """Installs and wires the framework router."""

    name = "routing"
    title = "Router setup"
    feature = Feature.ROUTER

    def enabled(self, choices: ChoiceModel) -> bool:
        return (
            super().enabled(choices)
            and resolve_router_package(choices.framework) is not None
        )

    async def execute(self, ctx: StepContext) -> StepOutcome:
        package = ctx.binding.router_package
        if package is None:
            return StepOutcome.skipped(self.name)

        await ctx.runner.check(
            ctx.package_manager.add_command([f"{package}@latest"]), ctx.project_root
        )

        wiring = ROUTER_WIRING.get(ctx.choices.framework)
        if wiring is None:
            return StepOutcome.success(self.name, f"{package} installed")

        # Router files are rendered only once every entry patch applied.
        results = await asyncio.to_thread(self._apply_patches, ctx, wiring)
        misses = [r for r in results if r.unmatched]
        if misses:
            return StepOutcome.warning(
                self.name,
                f"{package} installed but not wired: {_describe_misses(ctx, misses)}",
                hint=f"Wire the router by hand, see {ctx.choices.info.router_docs_url}",
            )

        context = ctx.template_context()
        written = [r.path for r in results]
        for template_name, output in wiring.files.items():
            out = ctx.path(output.format(ext=ctx.binding.file_extension))
            written.append(await self.renderer.render_to_file(template_name, out, context))

        return StepOutcome.success(self.name, f"{package} installed and wired", files=written)

    def _apply_patches(self, ctx: StepContext, wiring: RouterWiring) -> list[PatchResult]:
        targets = {
            ctx.path(self._target_path(ctx, target)): rules
            for target, rules in wiring.patches.items()
        }
        results = patch_files(targets)
        for result in results:
            if result.written:
                ctx.claim(result.path, self.name)
        return results

    @staticmethod
    def _target_path(ctx: StepContext, target: str) -> str:
        if target == "entry":
            return ctx.binding.entry_file
        if target == "root":
            if ctx.binding.root_component is None:
                raise ValueError(f"{ctx.choices.framework.value} has no root component")
            return ctx.binding.root_component
        return target


def _describe_misses(ctx: StepContext, results: list[PatchResult]) -> str:
    parts = []
    for result in results:
        where = ctx.relative(result.path)
        if result.missing:
            parts.append(f"{where} not found")
        else:
            parts.append(f"{where}: could not {'; '.join(result.unmatched)}")
    return ", ".join(parts)

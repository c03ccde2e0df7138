"""Main materialization orchestrator.

Takes a ``ChoiceModel`` and turns it into a project on disk by running a
fixed, ordered list of steps:

1. scaffold (create-vite)          -- mandatory
2. install dependencies             -- mandatory
3. Tailwind CSS                     -- ``styling``
4. router                           -- ``router``
5. folder structure                 -- ``folder_structure``
6. Prettier                         -- ``linting``
7. ``.env`` files                   -- ``env_files``
8. README                           -- mandatory
9. showcase content                 -- ``showcase``

The orchestrator folds over the steps and stops at the first fatal
outcome.  Warnings are reported and the run continues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from ..choices import ChoiceModel
from ..config import Config
from ..package_manager import get_package_manager
from ..resolver import TemplateBinding, resolve_binding
from ..runner import CommandRunner
from ..utils import console, print_hint
from .env_gen import EnvGenerator
from .lint_gen import LintGenerator
from .readme_gen import ReadmeGenerator
from .router_gen import RouterGenerator
from .showcase_gen import ShowcaseGenerator
from .steps import OutcomeKind, Step, StepContext, StepOutcome
from .structure_gen import StructureGenerator
from .styling_gen import StylingGenerator
from .templates import TemplateRenderer
from .vite_gen import InstallGenerator, ScaffoldGenerator

OutcomeCallback = Callable[[Step, StepOutcome], None]


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class MaterializationResult:
    """Every step outcome of one run, in execution order."""

    project_root: Path
    outcomes: list[StepOutcome] = field(default_factory=list)

    @property
    def fatal(self) -> Optional[StepOutcome]:
        return next((o for o in self.outcomes if o.is_fatal), None)

    @property
    def success(self) -> bool:
        return self.fatal is None

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    @property
    def warnings(self) -> list[StepOutcome]:
        return [o for o in self.outcomes if o.kind is OutcomeKind.WARNING]

    def outcome(self, step: str) -> Optional[StepOutcome]:
        """Return the outcome of *step*, or ``None`` if it never ran."""
        return next((o for o in self.outcomes if o.step == step), None)

    def ran(self, step: str) -> bool:
        outcome = self.outcome(step)
        return outcome is not None and outcome.kind is not OutcomeKind.SKIPPED


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ProjectMaterializer:
    """Runs the materialization pipeline for one ``ChoiceModel``.

    The command runner and template renderer are injectable so tests can
    drive the whole pipeline without spawning processes.
    """

    def __init__(
        self,
        choices: ChoiceModel,
        config: Optional[Config] = None,
        runner: Optional[CommandRunner] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.choices = choices
        self.config = config or Config()
        self.binding: TemplateBinding = resolve_binding(choices.framework, choices.language)
        self.package_manager = get_package_manager(self.config.package_manager)
        self.runner = runner or CommandRunner(timeout=self.config.command_timeout)
        self.renderer = renderer or TemplateRenderer()
        self.steps: list[Step] = self._build_steps()

    @property
    def project_root(self) -> Path:
        return self.config.project_path(self.choices.project_name)

    def _build_steps(self) -> list[Step]:
        r = self.renderer
        return [
            ScaffoldGenerator(),
            InstallGenerator(),
            StylingGenerator(r),
            RouterGenerator(r),
            StructureGenerator(r),
            LintGenerator(r),
            EnvGenerator(r),
            ReadmeGenerator(r),
            ShowcaseGenerator(r),
        ]

    def build_context(self) -> StepContext:
        return StepContext(
            choices=self.choices,
            binding=self.binding,
            config=self.config,
            package_manager=self.package_manager,
            runner=self.runner,
            project_root=self.project_root,
        )

    # -- Public API --------------------------------------------------------

    async def materialize(
        self, on_outcome: Optional[OutcomeCallback] = None
    ) -> MaterializationResult:
        """Run every enabled step in order.

        Args:
            on_outcome: Called after each step with the step and its
                outcome.  Defaults to printing a status line.

        Returns:
            The ``MaterializationResult``.  Execution stops after the first
            fatal outcome, so later steps are absent from the result.
        """
        report = on_outcome or report_outcome
        ctx = self.build_context()
        result = MaterializationResult(project_root=self.project_root)

        for step in self.steps:
            if not step.enabled(self.choices):
                outcome = StepOutcome.skipped(step.name)
            else:
                if step.mandatory:
                    console.print(f"[magenta]{step.title}...[/magenta]")
                outcome = await step.run(ctx)
            result.outcomes.append(outcome)
            if outcome.kind is OutcomeKind.SUCCESS:
                ctx.completed.add(step.name)
            report(step, outcome)
            if outcome.is_fatal:
                break

        return result


# ---------------------------------------------------------------------------
# Default reporting
# ---------------------------------------------------------------------------


def report_outcome(step: Step, outcome: StepOutcome) -> None:
    """Print one status line for *outcome*."""
    if outcome.kind is OutcomeKind.SKIPPED:
        return
    if outcome.kind is OutcomeKind.SUCCESS:
        console.print(f"  [green]+[/green] {outcome.message or step.title}")
    elif outcome.kind is OutcomeKind.WARNING:
        console.print(f"  [yellow]![/yellow] {outcome.message}")
        if outcome.hint:
            print_hint(outcome.hint)
    else:
        console.print(f"  [red]x[/red] {step.title} failed")

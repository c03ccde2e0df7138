"""Step protocol shared by every materialization step.

A step receives a ``StepContext`` and returns a ``StepOutcome`` tagged
success, warning, fatal or skipped.  ``Step.run`` turns ``CommandError`` and
``OSError`` into a fatal outcome for mandatory steps and a warning for
optional ones; any other exception propagates to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from ..choices import ChoiceModel, Feature
from ..config import Config
from ..errors import CommandError
from ..package_manager import PackageManager
from ..resolver import TemplateBinding
from ..runner import CommandRunner
from .templates import TemplateRenderer


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    FATAL = "fatal"
    SKIPPED = "skipped"


@dataclass
class StepOutcome:
    """Result of running (or skipping) one step."""

    step: str
    kind: OutcomeKind
    message: str = ""
    hint: str = ""
    files: list[Path] = field(default_factory=list)

    @classmethod
    def success(cls, step: str, message: str = "", files: Optional[list[Path]] = None) -> "StepOutcome":
        return cls(step, OutcomeKind.SUCCESS, message, files=files or [])

    @classmethod
    def warning(
        cls,
        step: str,
        message: str,
        hint: str = "",
        files: Optional[list[Path]] = None,
    ) -> "StepOutcome":
        return cls(step, OutcomeKind.WARNING, message, hint, files or [])

    @classmethod
    def fatal(cls, step: str, message: str) -> "StepOutcome":
        return cls(step, OutcomeKind.FATAL, message)

    @classmethod
    def skipped(cls, step: str) -> "StepOutcome":
        return cls(step, OutcomeKind.SKIPPED)

    @property
    def is_fatal(self) -> bool:
        return self.kind is OutcomeKind.FATAL


@dataclass
class StepContext:
    """Everything a step needs: the run's choices and its collaborators."""

    choices: ChoiceModel
    binding: TemplateBinding
    config: Config
    package_manager: PackageManager
    runner: CommandRunner
    project_root: Path
    # project-relative path -> name of the step that last patched or wrote it
    touched: dict[str, str] = field(default_factory=dict)
    # names of the steps that finished with a success outcome
    completed: set[str] = field(default_factory=set)

    def path(self, relative: str) -> Path:
        return self.project_root / relative

    def relative(self, path: Path) -> str:
        return path.relative_to(self.project_root).as_posix()

    def claim(self, path: Path, step: str, carries: tuple[str, ...] = ()) -> Optional[str]:
        """Record that *step* is about to overwrite *path*.

        Returns the name of an earlier step whose changes to the file will be
        lost, or ``None``.  Steps listed in *carries* are ones whose changes
        the new content reproduces.
        """
        key = self.relative(path)
        previous = self.touched.get(key)
        self.touched[key] = step
        if previous and previous != step and previous not in carries:
            return previous
        return None

    def template_context(self) -> dict[str, Any]:
        """Build the Jinja2 context shared by every template."""
        choices = self.choices
        info = choices.info
        return {
            "project_name": choices.project_name,
            "framework": choices.framework.value,
            "framework_label": info.label,
            "framework_description": info.description,
            "framework_docs_url": info.docs_url,
            "router_label": info.router_label,
            "router_docs_url": info.router_docs_url,
            "language": choices.language.value,
            "language_label": choices.language.label,
            "is_typescript": choices.is_typescript,
            "template_id": self.binding.template_id,
            "file_extension": self.binding.file_extension,
            "router_package": self.binding.router_package,
            "styling_glob": self.binding.styling_glob,
            "entry_file": self.binding.entry_file,
            "root_component": self.binding.root_component,
            "styling": choices.has(Feature.STYLING),
            "router": choices.has(Feature.ROUTER),
            "folder_structure": choices.has(Feature.FOLDER_STRUCTURE),
            "linting": choices.has(Feature.LINTING),
            "env_files": choices.has(Feature.ENV_FILES),
            "showcase": choices.has(Feature.SHOWCASE),
            "package_manager": self.package_manager.name,
            "run_dev": self.package_manager.run_script("dev"),
            "run_build": self.package_manager.run_script("build"),
            "run_preview": self.package_manager.run_script("preview"),
            "run_format": self.package_manager.run_script("format"),
            "dev_url": self.config.dev_url,
            "api_url": self.config.api_url,
        }


class Step:
    """Base class for materialization steps.

    Subclasses set ``name``, ``title`` and optionally ``feature`` (the flag
    that gates the step), ``mandatory`` and ``hint`` (a remediation hint
    shown when the step fails softly), then implement :meth:`execute`.
    """

    name: str = ""
    title: str = ""
    feature: Optional[Feature] = None
    mandatory: bool = False
    hint: str = ""

    def enabled(self, choices: ChoiceModel) -> bool:
        return self.feature is None or choices.has(self.feature)

    async def run(self, ctx: StepContext) -> StepOutcome:
        """Execute the step, converting expected failures into outcomes."""
        try:
            return await self.execute(ctx)
        except (CommandError, OSError) as exc:
            if self.mandatory:
                return StepOutcome.fatal(self.name, str(exc))
            return StepOutcome.warning(
                self.name, f"{self.title} failed: {exc}", hint=self.hint
            )

    async def execute(self, ctx: StepContext) -> StepOutcome:
        raise NotImplementedError


class TemplateStep(Step):
    """A step that renders files through a ``TemplateRenderer``."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

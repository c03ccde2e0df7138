"""vitekit scaffolder -- turns user choices into a Vite project on disk.

Quick usage::

    from vitekit.choices import ChoiceModel, Feature, Framework, Language
    from vitekit.scaffolder import ProjectMaterializer

    choices = ChoiceModel(
        project_name="my-app",
        framework=Framework.REACT,
        language=Language.TYPESCRIPT,
        features={Feature.STYLING, Feature.ROUTER},
    )
    result = await ProjectMaterializer(choices).materialize()
"""

from vitekit.scaffolder.generator import MaterializationResult, ProjectMaterializer
from vitekit.scaffolder.steps import OutcomeKind, Step, StepContext, StepOutcome
from vitekit.scaffolder.templates import TemplateRenderer

__all__ = [
    "MaterializationResult",
    "OutcomeKind",
    "ProjectMaterializer",
    "Step",
    "StepContext",
    "StepOutcome",
    "TemplateRenderer",
]

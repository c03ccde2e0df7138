"""User choices for a scaffolding run.

``ChoiceModel`` is the validated, immutable set of decisions collected by the
prompts: project name, framework, language and optional features.  The
module also owns the framework metadata table and the feature support table
that decides which optional features are offered for a framework.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MAX_PROJECT_NAME_LENGTH = 50

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")
LEGACY_PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class Framework(str, Enum):
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    PREACT = "preact"
    LIT = "lit"
    VANILLA = "vanilla"


class Language(str, Enum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @property
    def label(self) -> str:
        return "TypeScript" if self is Language.TYPESCRIPT else "JavaScript"


class Feature(str, Enum):
    """Optional add-ons, each gating one materialization step."""

    STYLING = "styling"
    ROUTER = "router"
    FOLDER_STRUCTURE = "folder_structure"
    LINTING = "linting"
    ENV_FILES = "env_files"
    SHOWCASE = "showcase"


class FrameworkInfo(BaseModel):
    """Display metadata for a framework."""

    model_config = ConfigDict(frozen=True)

    label: str
    description: str
    docs_url: str
    router_docs_url: Optional[str] = None
    router_label: Optional[str] = None


FRAMEWORK_INFO: dict[Framework, FrameworkInfo] = {
    Framework.REACT: FrameworkInfo(
        label="React",
        description="The most popular library for building user interfaces",
        docs_url="https://react.dev",
        router_docs_url="https://reactrouter.com",
        router_label="React Router",
    ),
    Framework.VUE: FrameworkInfo(
        label="Vue",
        description="Progressive framework that's easy to learn and powerful",
        docs_url="https://vuejs.org",
        router_docs_url="https://router.vuejs.org",
        router_label="Vue Router",
    ),
    Framework.SVELTE: FrameworkInfo(
        label="Svelte",
        description="Truly reactive framework with no virtual DOM",
        docs_url="https://svelte.dev",
        router_docs_url="https://github.com/EmilTholin/svelte-routing",
        router_label="Svelte Routing",
    ),
    Framework.PREACT: FrameworkInfo(
        label="Preact",
        description="Fast 3KB alternative to React with the same API",
        docs_url="https://preactjs.com",
    ),
    Framework.LIT: FrameworkInfo(
        label="Lit",
        description="Simple, fast, and lightweight web components",
        docs_url="https://lit.dev",
    ),
    Framework.VANILLA: FrameworkInfo(
        label="Vanilla",
        description="Pure JavaScript with no framework overhead",
        docs_url="https://vitejs.dev",
    ),
}

_COMPONENT_FRAMEWORKS = frozenset(
    {Framework.REACT, Framework.VUE, Framework.SVELTE, Framework.PREACT}
)

# Feature -> frameworks it can be offered for.
FEATURE_SUPPORT: dict[Feature, frozenset[Framework]] = {
    Feature.STYLING: _COMPONENT_FRAMEWORKS,
    Feature.ROUTER: frozenset({Framework.REACT, Framework.VUE, Framework.SVELTE}),
    Feature.FOLDER_STRUCTURE: frozenset(Framework),
    Feature.LINTING: frozenset(Framework),
    Feature.ENV_FILES: frozenset(Framework),
    Feature.SHOWCASE: _COMPONENT_FRAMEWORKS,
}


def supports(framework: Framework, feature: Feature) -> bool:
    """Return ``True`` if *feature* can be enabled for *framework*."""
    return framework in FEATURE_SUPPORT[feature]


def supported_features(framework: Framework) -> list[Feature]:
    """Return the features offered for *framework*, in prompt order."""
    return [feature for feature in Feature if supports(framework, feature)]


def validate_project_name(name: str, *, legacy: bool = False) -> Optional[str]:
    """Check a project name.

    Returns ``None`` when the name is acceptable, otherwise a message
    suitable for showing next to the prompt.

    Examples::

        validate_project_name("my-app")    -> None
        validate_project_name("my app")    -> "Project name can only contain ..."
        validate_project_name("1st-app")   -> "Project name must start with a letter"
    """
    if not name:
        return "Project name cannot be empty"
    if len(name) > MAX_PROJECT_NAME_LENGTH:
        return f"Project name must be at most {MAX_PROJECT_NAME_LENGTH} characters"
    if not LEGACY_PROJECT_NAME_PATTERN.match(name):
        return "Project name can only contain letters, numbers, dashes and underscores"
    if not legacy and not PROJECT_NAME_PATTERN.match(name):
        return "Project name must start with a letter"
    return None


class ChoiceModel(BaseModel):
    """The validated decisions for one run.  Immutable once built."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and package name of the new project")
    framework: Framework = Field(default=Framework.REACT)
    language: Language = Field(default=Language.JAVASCRIPT)
    features: frozenset[Feature] = Field(default_factory=frozenset)
    legacy_names: bool = Field(default=False, exclude=True)

    @model_validator(mode="after")
    def _check_name_and_features(self) -> "ChoiceModel":
        error = validate_project_name(self.project_name, legacy=self.legacy_names)
        if error:
            raise ValueError(error)
        unsupported = sorted(
            f.value for f in self.features if not supports(self.framework, f)
        )
        if unsupported:
            raise ValueError(
                f"{', '.join(unsupported)} not available for {self.framework.value}"
            )
        return self

    @field_validator("features", mode="before")
    @classmethod
    def _coerce_features(cls, value):
        if value is None:
            return frozenset()
        return frozenset(value)

    def has(self, feature: Feature) -> bool:
        """Return ``True`` if *feature* was selected."""
        return feature in self.features

    @property
    def info(self) -> FrameworkInfo:
        return FRAMEWORK_INFO[self.framework]

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

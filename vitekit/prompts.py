"""Interactive questions that produce a ``ChoiceModel``.

Questions are asked through a ``Prompter`` so tests can script answers.
Feature questions are only asked when the chosen framework supports the
feature, which keeps unsupported combinations out of the model entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import questionary
from questionary import Choice, Style

from .choices import (
    FRAMEWORK_INFO,
    ChoiceModel,
    Feature,
    Framework,
    Language,
    supported_features,
    validate_project_name,
)
from .config import Config

DEFAULT_PROJECT_NAME = "my-app"

STYLE = Style(
    [
        ("qmark", "fg:#d670d6 bold"),
        ("question", "bold"),
        ("answer", "fg:#00bcd4 bold"),
        ("pointer", "fg:#d670d6 bold"),
        ("highlighted", "fg:#d670d6 bold"),
        ("selected", "fg:#00bcd4"),
        ("instruction", "fg:#858585 italic"),
    ]
)

Validator = Callable[[str], Union[bool, str]]


@dataclass(frozen=True)
class FeatureQuestion:
    message: str
    default: bool


FEATURE_QUESTIONS: dict[Feature, FeatureQuestion] = {
    Feature.STYLING: FeatureQuestion("Add Tailwind CSS? (Utility-first CSS framework)", True),
    Feature.ROUTER: FeatureQuestion("Include router? (For multi-page navigation)", False),
    Feature.FOLDER_STRUCTURE: FeatureQuestion(
        "Create organized folder structure? (Recommended)", True
    ),
    Feature.LINTING: FeatureQuestion("Add Prettier for code formatting?", False),
    Feature.ENV_FILES: FeatureQuestion("Create .env files?", False),
    Feature.SHOWCASE: FeatureQuestion("Replace the starter page with a showcase?", False),
}


def make_name_validator(legacy: bool = False) -> Validator:
    """Return a questionary ``validate`` callback for project names.

    The callback returns ``True`` for a valid name or the error message,
    which questionary shows inline before asking again.
    """

    def _validate(value: str) -> Union[bool, str]:
        error = validate_project_name(value.strip(), legacy=legacy)
        return True if error is None else error

    return _validate


class Prompter:
    """Thin wrapper over questionary.

    ``unsafe_ask`` is used so Ctrl-C raises ``KeyboardInterrupt`` instead of
    returning ``None``.
    """

    def __init__(self, style: Optional[Style] = STYLE) -> None:
        self.style = style

    def text(self, message: str, default: str = "", validate: Optional[Validator] = None) -> str:
        return questionary.text(
            message, default=default, validate=validate, style=self.style
        ).unsafe_ask()

    def select(self, message: str, choices: list[tuple[str, str]], default: str) -> str:
        return questionary.select(
            message,
            choices=[Choice(title=title, value=value) for title, value in choices],
            default=default,
            style=self.style,
        ).unsafe_ask()

    def confirm(self, message: str, default: bool = False) -> bool:
        return questionary.confirm(message, default=default, style=self.style).unsafe_ask()


def framework_choices() -> list[tuple[str, str]]:
    return [(FRAMEWORK_INFO[f].label, f.value) for f in Framework]


def language_choices() -> list[tuple[str, str]]:
    return [(lang.label, lang.value) for lang in Language]


def ask_choices(config: Config, prompter: Optional[Any] = None) -> ChoiceModel:
    """Ask every question and return the validated ``ChoiceModel``.

    Args:
        config: Supplies the project-name mode (strict or legacy).
        prompter: Object with ``text``/``select``/``confirm`` methods.
            Defaults to a questionary-backed ``Prompter``.
    """
    prompter = prompter or Prompter()

    project_name = prompter.text(
        "Project name:",
        default=DEFAULT_PROJECT_NAME,
        validate=make_name_validator(config.legacy_names),
    ).strip()
    framework = Framework(
        prompter.select("Choose your framework:", framework_choices(), Framework.REACT.value)
    )
    language = Language(
        prompter.select("Select your language:", language_choices(), Language.JAVASCRIPT.value)
    )

    features = set()
    for feature in supported_features(framework):
        question = FEATURE_QUESTIONS[feature]
        if prompter.confirm(question.message, default=question.default):
            features.add(feature)

    return ChoiceModel(
        project_name=project_name,
        framework=framework,
        language=language,
        features=features,
        legacy_names=config.legacy_names,
    )

"""Pure mappings from ``(framework, language)`` to scaffold artefacts.

Every table here is keyed by the full enum domain and checked for
totality at import time, so adding a ``Framework`` or ``Language`` member
without extending the tables fails loudly instead of producing ``None``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .choices import Framework, Language

_TS = Language.TYPESCRIPT
_JS = Language.JAVASCRIPT

# create-vite ``--template`` values.
GENERATOR_TEMPLATES: dict[tuple[Framework, Language], str] = {
    (Framework.REACT, _TS): "react-ts",
    (Framework.REACT, _JS): "react",
    (Framework.VUE, _TS): "vue-ts",
    (Framework.VUE, _JS): "vue",
    (Framework.SVELTE, _TS): "svelte-ts",
    (Framework.SVELTE, _JS): "svelte",
    (Framework.PREACT, _TS): "preact-ts",
    (Framework.PREACT, _JS): "preact",
    (Framework.LIT, _TS): "lit-ts",
    (Framework.LIT, _JS): "lit",
    (Framework.VANILLA, _TS): "vanilla-ts",
    (Framework.VANILLA, _JS): "vanilla",
}

FILE_EXTENSIONS: dict[tuple[Framework, Language], str] = {
    (Framework.REACT, _TS): "tsx",
    (Framework.REACT, _JS): "jsx",
    (Framework.VUE, _TS): "ts",
    (Framework.VUE, _JS): "js",
    (Framework.SVELTE, _TS): "ts",
    (Framework.SVELTE, _JS): "js",
    (Framework.PREACT, _TS): "tsx",
    (Framework.PREACT, _JS): "jsx",
    (Framework.LIT, _TS): "ts",
    (Framework.LIT, _JS): "js",
    (Framework.VANILLA, _TS): "ts",
    (Framework.VANILLA, _JS): "js",
}

ROUTER_PACKAGES: dict[Framework, Optional[str]] = {
    Framework.REACT: "react-router-dom",
    Framework.VUE: "vue-router",
    Framework.SVELTE: "svelte-routing",
    Framework.PREACT: None,
    Framework.LIT: None,
    Framework.VANILLA: None,
}

STYLING_GLOBS: dict[Framework, str] = {
    Framework.REACT: "./src/**/*.{js,jsx,ts,tsx}",
    Framework.VUE: "./src/**/*.{vue,js,ts,jsx,tsx}",
    Framework.SVELTE: "./src/**/*.{svelte,js,ts,jsx,tsx}",
    Framework.PREACT: "./src/**/*.{js,jsx,ts,tsx}",
    Framework.LIT: "./src/**/*.{js,ts}",
    Framework.VANILLA: "./src/**/*.{js,ts}",
}

# Bootstrap module written by create-vite for each template.
ENTRY_FILES: dict[tuple[Framework, Language], str] = {
    (Framework.REACT, _TS): "src/main.tsx",
    (Framework.REACT, _JS): "src/main.jsx",
    (Framework.VUE, _TS): "src/main.ts",
    (Framework.VUE, _JS): "src/main.js",
    (Framework.SVELTE, _TS): "src/main.ts",
    (Framework.SVELTE, _JS): "src/main.js",
    (Framework.PREACT, _TS): "src/main.tsx",
    (Framework.PREACT, _JS): "src/main.jsx",
    (Framework.LIT, _TS): "src/my-element.ts",
    (Framework.LIT, _JS): "src/my-element.js",
    (Framework.VANILLA, _TS): "src/main.ts",
    (Framework.VANILLA, _JS): "src/main.js",
}

# Top-level UI component; lit and vanilla templates have none.
ROOT_COMPONENTS: dict[tuple[Framework, Language], Optional[str]] = {
    (Framework.REACT, _TS): "src/App.tsx",
    (Framework.REACT, _JS): "src/App.jsx",
    (Framework.VUE, _TS): "src/App.vue",
    (Framework.VUE, _JS): "src/App.vue",
    (Framework.SVELTE, _TS): "src/App.svelte",
    (Framework.SVELTE, _JS): "src/App.svelte",
    (Framework.PREACT, _TS): "src/app.tsx",
    (Framework.PREACT, _JS): "src/app.jsx",
    (Framework.LIT, _TS): None,
    (Framework.LIT, _JS): None,
    (Framework.VANILLA, _TS): None,
    (Framework.VANILLA, _JS): None,
}

STYLESHEET_CANDIDATES: tuple[str, ...] = ("src/index.css", "src/style.css", "src/app.css")
STYLESHEET_FALLBACK = "src/index.css"


def _check_total() -> None:
    pairs = {(f, lang) for f in Framework for lang in Language}
    for name, table in (
        ("GENERATOR_TEMPLATES", GENERATOR_TEMPLATES),
        ("FILE_EXTENSIONS", FILE_EXTENSIONS),
        ("ENTRY_FILES", ENTRY_FILES),
        ("ROOT_COMPONENTS", ROOT_COMPONENTS),
    ):
        missing = pairs - table.keys()
        if missing:
            raise RuntimeError(f"{name} is missing {sorted(missing)}")
    for name, table in (("ROUTER_PACKAGES", ROUTER_PACKAGES), ("STYLING_GLOBS", STYLING_GLOBS)):
        missing = set(Framework) - table.keys()
        if missing:
            raise RuntimeError(f"{name} is missing {sorted(missing)}")


_check_total()


def resolve_generator_template(framework: Framework, language: Language) -> str:
    """Return the create-vite template id for the pair."""
    return GENERATOR_TEMPLATES[(framework, language)]


def resolve_file_extension(framework: Framework, language: Language) -> str:
    """Return the component-file extension (``tsx``, ``jsx``, ``ts`` or ``js``)."""
    return FILE_EXTENSIONS[(framework, language)]


def resolve_router_package(framework: Framework) -> Optional[str]:
    """Return the router package for *framework*, or ``None`` if it has none."""
    return ROUTER_PACKAGES[framework]


def resolve_styling_glob(framework: Framework) -> str:
    """Return the Tailwind ``content`` glob covering the framework's sources."""
    return STYLING_GLOBS[framework]


def resolve_entry_file(framework: Framework, language: Language) -> str:
    return ENTRY_FILES[(framework, language)]


def resolve_root_component(framework: Framework, language: Language) -> Optional[str]:
    return ROOT_COMPONENTS[(framework, language)]


class TemplateBinding(BaseModel):
    """Artefact identifiers derived from a ``(framework, language)`` pair."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    file_extension: str
    router_package: Optional[str]
    styling_glob: str
    entry_file: str
    root_component: Optional[str]

    @property
    def router_entry_file(self) -> str:
        """Path of the router configuration module, relative to the project root."""
        return f"src/router/index.{self.file_extension}"


def resolve_binding(framework: Framework, language: Language) -> TemplateBinding:
    """Compute the full ``TemplateBinding`` for the pair."""
    return TemplateBinding(
        template_id=resolve_generator_template(framework, language),
        file_extension=resolve_file_extension(framework, language),
        router_package=resolve_router_package(framework),
        styling_glob=resolve_styling_glob(framework),
        entry_file=resolve_entry_file(framework, language),
        root_component=resolve_root_component(framework, language),
    )

"""Shared pytest fixtures for the vitekit test suite.

Provides reusable fixtures for:
- A ``Config`` rooted in a temporary output directory
- Minimal create-vite scaffolds for every template id
- A fake command runner that records commands and simulates exit codes
- A scripted prompter standing in for questionary
- Ready-made ``StepContext`` objects for exercising single steps
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from vitekit.choices import ChoiceModel, Feature, Framework, Language
from vitekit.config import Config
from vitekit.runner import CommandResult, CommandRunner
from vitekit.scaffolder.generator import ProjectMaterializer
from vitekit.scaffolder.steps import StepContext
from vitekit.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# create-vite scaffolds
# ---------------------------------------------------------------------------

_GITIGNORE = "node_modules\ndist\ndist-ssr\n*.local\n"

_REACT_MAIN = """\
import {{ StrictMode }} from 'react'
import {{ createRoot }} from 'react-dom/client'
import './index.css'
import App from './App.{ext}'

createRoot(document.getElementById('root'){bang}).render(
  <StrictMode>
    <App />
  </StrictMode>,
)
"""

_REACT_APP = """\
import { useState } from 'react'
import './App.css'

function App() {
  const [count, setCount] = useState(0)
  return <button onClick={() => setCount((count) => count + 1)}>count is {count}</button>
}

export default App
"""

_VUE_MAIN = """\
import { createApp } from 'vue'
import './style.css'
import App from './App.vue'

createApp(App).mount('#app')
"""

_VUE_APP = """\
<script setup{lang}>
import HelloWorld from './components/HelloWorld.vue'
</script>

<template>
  <div>
    <a href="https://vite.dev" target="_blank">Vite</a>
  </div>
  <HelloWorld msg="Vite + Vue" />
</template>
"""

_SVELTE_MAIN = """\
import { mount } from 'svelte'
import './app.css'
import App from './App.svelte'

const app = mount(App, { target: document.getElementById('app') })

export default app
"""

_PREACT_MAIN = """\
import {{ render }} from 'preact'
import './index.css'
import {{ App }} from './app.{ext}'

render(<App />, document.getElementById('app'))
"""


def _scaffold_files(template_id: str) -> dict[str, str]:
    """Return ``{relative_path: content}`` for a minimal create-vite template."""
    ts = template_id.endswith("-ts")
    framework = template_id.removesuffix("-ts")
    script = "ts" if ts else "js"
    jsx = "tsx" if ts else "jsx"

    files: dict[str, str] = {
        ".gitignore": _GITIGNORE,
        "index.html": "<!doctype html>\n<html><body><div id=\"app\"></div></body></html>\n",
        "README.md": "# Vite template\n",
    }
    if framework == "react":
        files[f"src/main.{jsx}"] = _REACT_MAIN.format(ext=jsx, bang="!" if ts else "")
        files[f"src/App.{jsx}"] = _REACT_APP
        files["src/index.css"] = ":root { color: black; }\n"
        files["src/App.css"] = "#root { margin: 0 auto; }\n"
    elif framework == "vue":
        files[f"src/main.{script}"] = _VUE_MAIN
        files["src/App.vue"] = _VUE_APP.format(lang=' lang="ts"' if ts else "")
        files["src/components/HelloWorld.vue"] = "<template><h1>{{ msg }}</h1></template>\n"
        files["src/style.css"] = ":root { color: black; }\n"
    elif framework == "svelte":
        files[f"src/main.{script}"] = _SVELTE_MAIN
        files["src/App.svelte"] = "<main><h1>Vite + Svelte</h1></main>\n"
        files["src/app.css"] = ":root { color: black; }\n"
    elif framework == "preact":
        files[f"src/main.{jsx}"] = _PREACT_MAIN.format(ext=jsx)
        files[f"src/app.{jsx}"] = "export function App() { return <h1>Vite + Preact</h1> }\n"
        files["src/index.css"] = ":root { color: black; }\n"
        files["src/app.css"] = "#app { margin: 0 auto; }\n"
    elif framework == "lit":
        files[f"src/my-element.{script}"] = "import { LitElement, html } from 'lit'\n"
        files["src/index.css"] = ":root { color: black; }\n"
    else:
        files[f"src/main.{script}"] = "import './style.css'\n"
        files[f"src/counter.{script}"] = "export function setupCounter() {}\n"
        files["src/style.css"] = ":root { color: black; }\n"
    return files


def write_vite_scaffold(root: Path, template_id: str) -> Path:
    """Write a create-vite-like project for *template_id* into *root*."""
    root.mkdir(parents=True, exist_ok=True)
    manifest = {
        "name": root.name,
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": {
            "dev": "vite",
            "build": "vite build",
            "preview": "vite preview",
        },
    }
    (root / "package.json").write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    for relative, content in _scaffold_files(template_id).items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------


class FakeRunner(CommandRunner):
    """Records commands instead of running them.

    ``fail_on`` maps a substring of the joined command line to the exit
    code it should return.  Create commands write a fake scaffold unless
    ``scaffold`` is ``False``.
    """

    def __init__(self, fail_on: Optional[dict[str, int]] = None, scaffold: bool = True) -> None:
        super().__init__()
        self.fail_on = fail_on or {}
        self.scaffold = scaffold
        self.calls: list[tuple[list[str], Path]] = []

    async def run(self, cmd: list[str], cwd: Path, *, interactive: bool = False) -> CommandResult:
        self.calls.append((list(cmd), Path(cwd)))
        joined = " ".join(cmd)
        for needle, code in self.fail_on.items():
            if needle in joined:
                return CommandResult(list(cmd), code, "", f"simulated failure: {needle}")

        if len(cmd) > 1 and cmd[1] == "create" and self.scaffold:
            name = cmd[3]
            template_id = cmd[cmd.index("--template") + 1]
            write_vite_scaffold(Path(cwd) / name, template_id)
        return CommandResult(list(cmd), 0)

    @property
    def commands(self) -> list[str]:
        return [" ".join(cmd) for cmd, _ in self.calls]

    def ran(self, needle: str) -> bool:
        return any(needle in command for command in self.commands)


class ScriptedPrompter:
    """Answers questions from a script keyed by message prefix.

    Unscripted questions take their default.  Every question asked is
    recorded in ``asked``.
    """

    def __init__(self, answers: Optional[dict[str, Any]] = None) -> None:
        self.answers = answers or {}
        self.asked: list[str] = []
        self.validators: dict[str, Callable[[str], Any]] = {}

    def _lookup(self, message: str, default: Any) -> Any:
        self.asked.append(message)
        for prefix, answer in self.answers.items():
            if message.startswith(prefix):
                if isinstance(answer, BaseException):
                    raise answer
                return answer
        return default

    def text(self, message: str, default: str = "", validate=None) -> str:
        if validate is not None:
            self.validators[message] = validate
        return self._lookup(message, default)

    def select(self, message: str, choices: list[tuple[str, str]], default: str) -> str:
        return self._lookup(message, default)

    def confirm(self, message: str, default: bool = False) -> bool:
        return self._lookup(message, default)


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    return ScriptedPrompter


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner where every command succeeds."""
    return FakeRunner()


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for runners with simulated failures."""
    return FakeRunner


@pytest.fixture
def scaffold_writer() -> Callable[[Path, str], Path]:
    return write_vite_scaffold


# ---------------------------------------------------------------------------
# Config & choices
# ---------------------------------------------------------------------------


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config whose output directory is a fresh temporary directory."""
    out = tmp_path / "workspace"
    out.mkdir()
    return Config(output_dir=out)


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def make_choices() -> Callable[..., ChoiceModel]:
    """Factory building a ``ChoiceModel`` from plain values."""

    def _make(
        framework: str = "react",
        language: str = "typescript",
        features: tuple[str, ...] = (),
        project_name: str = "demo-app",
    ) -> ChoiceModel:
        return ChoiceModel(
            project_name=project_name,
            framework=Framework(framework),
            language=Language(language),
            features={Feature(f) for f in features},
        )

    return _make


@pytest.fixture
def make_context(
    config: Config, fake_runner: FakeRunner, make_choices
) -> Callable[..., StepContext]:
    """Factory returning a ``StepContext`` over an already scaffolded project."""

    def _make(
        framework: str = "react",
        language: str = "typescript",
        features: tuple[str, ...] = (),
        runner: Optional[CommandRunner] = None,
        scaffold: bool = True,
        **config_overrides: Any,
    ) -> StepContext:
        choices = make_choices(framework, language, features)
        run_config = config.model_copy(update=config_overrides) if config_overrides else config
        materializer = ProjectMaterializer(choices, run_config, runner=runner or fake_runner)
        if scaffold:
            write_vite_scaffold(materializer.project_root, materializer.binding.template_id)
        return materializer.build_context()

    return _make

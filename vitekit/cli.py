"""vitekit command-line entry point.

Usage::

    vitekit
    python -m vitekit

The command takes no arguments: every choice is collected interactively.
Runs are tuned through ``VITEKIT_*`` environment variables (see
``vitekit.config``).
"""

from __future__ import annotations

import asyncio
import sys
from typing import Any, Optional

from pydantic import ValidationError

from . import __version__
from .choices import ChoiceModel, Feature
from .config import Config
from .package_manager import get_package_manager
from .prompts import ask_choices
from .scaffolder import MaterializationResult, ProjectMaterializer
from .utils import (
    console,
    print_error,
    print_hint,
    print_panel,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)

TROUBLESHOOTING_TIPS = [
    "Check your internet connection",
    "Make sure Node.js is installed (node --version)",
    "Try running the command again",
]


def _yes_no(value: bool) -> str:
    return "[magenta]Yes[/magenta]" if value else "[red]No[/red]"


def print_banner() -> None:
    print_panel(
        f"[bold cyan]vitekit[/bold cyan] {__version__}\n"
        "Create modern web apps in seconds!\n\n"
        "[dim]Use the arrow keys to move and Enter to confirm.[/dim]",
        title="Vite Project Setup",
    )


def print_configuration(choices: ChoiceModel, config: Config) -> None:
    info = choices.info
    console.print(
        f"\n  [magenta]Selected:[/magenta] [bold cyan]{choices.framework.value.upper()}[/bold cyan]"
    )
    console.print(f"  [dim]{info.description}[/dim]\n")
    print_summary_table(
        {
            "Project": choices.project_name,
            "Framework": choices.framework.value.upper(),
            "Language": choices.language.label,
            "Tailwind CSS": _yes_no(choices.has(Feature.STYLING)),
            "Router": _yes_no(choices.has(Feature.ROUTER)),
            "Structure": _yes_no(choices.has(Feature.FOLDER_STRUCTURE)),
            "Prettier": _yes_no(choices.has(Feature.LINTING)),
            "Env files": _yes_no(choices.has(Feature.ENV_FILES)),
            "Showcase": _yes_no(choices.has(Feature.SHOWCASE)),
            "Package manager": config.package_manager,
            "Location": str(config.project_path(choices.project_name)),
        },
        title="Your configuration",
    )


def print_next_steps(choices: ChoiceModel, config: Config, result: MaterializationResult) -> None:
    package_manager = get_package_manager(config.package_manager)
    print_step_header("SUCCESS! Your project is ready to go!")
    console.print(f"  [bold cyan]Project:[/bold cyan] {choices.project_name}\n")
    console.print("  [bold magenta]Next steps:[/bold magenta]")
    console.print(f"     1. [cyan]cd {choices.project_name}[/cyan]")
    console.print(f"     2. [cyan]{package_manager.run_script('dev')}[/cyan]")
    console.print(f"     3. [cyan]Open {config.dev_url}[/cyan]\n")

    if result.ran("styling"):
        console.print("  [bold cyan]Tailwind tip:[/bold cyan]")
        print_hint('Try: className="bg-blue-500 text-white p-4 rounded-lg"')
        console.print()
    if result.ran("routing") and choices.info.router_docs_url:
        console.print("  [bold cyan]Router docs:[/bold cyan]")
        print_hint(choices.info.router_docs_url)
        console.print()

    if result.warnings:
        print_warning(f"  Finished with {len(result.warnings)} warning(s):")
        for outcome in result.warnings:
            console.print(f"   - {outcome.message}")
            if outcome.hint:
                print_hint(f"  {outcome.hint}")
        console.print()

    print_hint("Need help? Check out README.md in your project folder!")


def print_failure(message: str) -> None:
    print_step_header("ERROR")
    print_error(f"  Message: {message}")
    console.print("\n  [cyan]Troubleshooting tips:[/cyan]")
    for tip in TROUBLESHOOTING_TIPS:
        console.print(f"     - {tip}")
    console.print()


def run(config: Config, prompter: Optional[Any] = None, runner: Optional[Any] = None) -> int:
    """Run one interactive session and return the process exit code."""
    print_banner()
    try:
        choices = ask_choices(config, prompter)
    except KeyboardInterrupt:
        print_warning("\nAborted.")
        return 1

    print_configuration(choices, config)

    materializer = ProjectMaterializer(choices, config, runner=runner)
    try:
        result = asyncio.run(materializer.materialize())
    except Exception as exc:
        print_failure(str(exc))
        return 1

    if not result.success:
        print_failure(result.fatal.message)
        return result.exit_code

    print_next_steps(choices, config, result)
    print_success("Done.")
    return 0


def main() -> None:
    """Console-script entry point."""
    try:
        config = Config.from_env()
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid VITEKIT_* environment configuration:\n{exc}")
        sys.exit(1)

    sys.exit(run(config))


if __name__ == "__main__":
    main()

"""Command vocabulary of the supported package managers.

Every package manager can run create-vite, install a manifest, and add
runtime or development dependencies, but each spells those commands
differently.  ``PackageManager`` hides the spelling behind one interface.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageManager:
    """Argument templates for one package manager."""

    name: str
    create_prefix: tuple[str, ...]
    template_separator: tuple[str, ...]
    install_args: tuple[str, ...]
    add_args: tuple[str, ...]
    add_dev_args: tuple[str, ...]

    def create_command(self, project_name: str, template_id: str) -> list[str]:
        """``<pm> create vite <name> [--] --template <id>``."""
        return [
            *self.create_prefix,
            project_name,
            *self.template_separator,
            "--template",
            template_id,
        ]

    def install_command(self) -> list[str]:
        return list(self.install_args)

    def add_command(self, packages: list[str], *, dev: bool = False) -> list[str]:
        """Command adding *packages* as runtime (or, with *dev*, development) dependencies."""
        prefix = self.add_dev_args if dev else self.add_args
        return [*prefix, *packages]

    def run_script(self, script: str) -> str:
        """How a user runs a ``package.json`` script, for docs and hints."""
        if self.name == "npm":
            return f"npm run {script}"
        return f"{self.name} {script}"


PACKAGE_MANAGERS: dict[str, PackageManager] = {
    "npm": PackageManager(
        name="npm",
        create_prefix=("npm", "create", "vite@latest"),
        # npm forwards flags after ``--`` to the create-vite binary.
        template_separator=("--",),
        install_args=("npm", "install"),
        add_args=("npm", "install"),
        add_dev_args=("npm", "install", "-D"),
    ),
    "pnpm": PackageManager(
        name="pnpm",
        create_prefix=("pnpm", "create", "vite"),
        template_separator=(),
        install_args=("pnpm", "install"),
        add_args=("pnpm", "add"),
        add_dev_args=("pnpm", "add", "-D"),
    ),
    "yarn": PackageManager(
        name="yarn",
        create_prefix=("yarn", "create", "vite"),
        template_separator=(),
        install_args=("yarn", "install"),
        add_args=("yarn", "add"),
        add_dev_args=("yarn", "add", "-D"),
    ),
    "bun": PackageManager(
        name="bun",
        create_prefix=("bun", "create", "vite"),
        template_separator=(),
        install_args=("bun", "install"),
        add_args=("bun", "add"),
        add_dev_args=("bun", "add", "-d"),
    ),
}


def get_package_manager(name: str) -> PackageManager:
    """Look up a package manager by name.

    Raises:
        KeyError: If *name* is not one of ``npm``, ``pnpm``, ``yarn``, ``bun``.
    """
    try:
        return PACKAGE_MANAGERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown package manager {name!r}; expected one of {', '.join(PACKAGE_MANAGERS)}"
        ) from None

"""vitekit configuration.

Centralised, typed configuration for a scaffolding run. Settings use a
Pydantic v2 model so they are validated at construction time. The CLI takes
no arguments, so the only way to tune a run is through ``VITEKIT_*``
environment variables read by :meth:`Config.from_env`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

PackageManagerName = Literal["npm", "pnpm", "yarn", "bun"]

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global vitekit configuration.

    Instances are created once by the CLI entry point and passed to the
    materializer and the prompt layer.
    """

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory in which the project folder is created",
    )
    package_manager: PackageManagerName = Field(default="npm")
    legacy_names: bool = Field(
        default=False,
        description="Accept project names starting with a digit or underscore",
    )
    command_timeout: Optional[int] = Field(
        default=None,
        ge=1,
        description="Kill external commands after this many seconds (None waits forever)",
    )
    dev_port: int = Field(default=5173, ge=1, le=65535)
    api_url: str = Field(default="http://localhost:3000/api")

    @property
    def dev_url(self) -> str:
        """URL the Vite dev server listens on."""
        return f"http://localhost:{self.dev_port}"

    def project_path(self, project_name: str) -> Path:
        """Return the directory a project named *project_name* is created in."""
        return self.output_dir / project_name

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            VITEKIT_OUTPUT_DIR, VITEKIT_PACKAGE_MANAGER, VITEKIT_LEGACY_NAMES,
            VITEKIT_COMMAND_TIMEOUT, VITEKIT_DEV_PORT, VITEKIT_API_URL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("VITEKIT_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["VITEKIT_OUTPUT_DIR"])
        if os.environ.get("VITEKIT_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["VITEKIT_PACKAGE_MANAGER"].strip().lower()
        if os.environ.get("VITEKIT_LEGACY_NAMES"):
            kwargs["legacy_names"] = os.environ["VITEKIT_LEGACY_NAMES"].strip().lower() in _TRUTHY
        if os.environ.get("VITEKIT_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["VITEKIT_COMMAND_TIMEOUT"])
        if os.environ.get("VITEKIT_DEV_PORT"):
            kwargs["dev_port"] = int(os.environ["VITEKIT_DEV_PORT"])
        if os.environ.get("VITEKIT_API_URL"):
            kwargs["api_url"] = os.environ["VITEKIT_API_URL"]
        return cls(**kwargs)

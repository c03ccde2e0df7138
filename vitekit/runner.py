"""External process execution for the materializer.

``CommandRunner`` is the single seam between vitekit and the outside world:
the materializer only ever calls :meth:`CommandRunner.run` /
:meth:`CommandRunner.check`, so tests can pass a double that records
commands and simulates exit codes without spawning processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import CommandError
from .utils import run_command


@dataclass
class CommandResult:
    """Outcome of one external command."""

    cmd: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Runs external commands one at a time, waiting for each to exit."""

    def __init__(self, timeout: Optional[int] = None) -> None:
        self.timeout = timeout

    async def run(
        self,
        cmd: list[str],
        cwd: Path,
        *,
        interactive: bool = False,
    ) -> CommandResult:
        """Run *cmd* in *cwd*.

        Args:
            cmd: Argument list.
            cwd: Working directory.
            interactive: Let the child share the terminal instead of
                capturing its output.

        Returns:
            The ``CommandResult``.  A missing executable is reported as exit
            code 127, the shell convention, rather than raised.
        """
        try:
            returncode, stdout, stderr = await run_command(
                cmd, cwd=cwd, timeout=self.timeout, capture=not interactive
            )
        except FileNotFoundError:
            return CommandResult(cmd, 127, "", f"{cmd[0]}: command not found")
        return CommandResult(cmd, returncode, stdout, stderr)

    async def check(
        self,
        cmd: list[str],
        cwd: Path,
        *,
        interactive: bool = False,
    ) -> CommandResult:
        """Run *cmd* and raise ``CommandError`` on a non-zero exit."""
        result = await self.run(cmd, cwd, interactive=interactive)
        if not result.ok:
            raise CommandError(result.cmd, result.returncode, result.stderr)
        return result

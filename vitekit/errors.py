"""Exception hierarchy for vitekit."""

from __future__ import annotations


class VitekitError(Exception):
    """Base class for every error raised by vitekit."""


class CommandError(VitekitError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = "") -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {' '.join(cmd)}"
        if stderr:
            message += f"\n{stderr.strip()[:500]}"
        super().__init__(message)


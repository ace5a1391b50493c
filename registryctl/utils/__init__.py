"""Utility functions and helpers for the registryctl application."""
import logging
import shlex
import subprocess
from typing import List

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Base class for fatal provisioning errors.

    ``step`` names the part of the flow that failed so the CLI can print a
    one-line diagnostic.
    """

    def __init__(self, message: str, step: str = "registryctl"):
        super().__init__(message)
        self.step = step

    def __str__(self) -> str:
        return f"{self.step}: {self.args[0]}"


class InputError(RegistryError):
    """Raised when a line cannot be read from standard input."""


class ManifestWriteError(RegistryError):
    """Raised when a rendered manifest cannot be written to disk."""


class CommandLaunchError(RegistryError):
    """Raised when an external binary cannot be started at all."""


def format_command(cmd: List[str]) -> str:
    """Render an argument vector for display only; it is never executed."""
    return " ".join(shlex.quote(part) for part in cmd)


def run_command(cmd: List[str]) -> subprocess.CompletedProcess:
    """Run ``cmd`` as an argument vector, capturing its output.

    Non-zero exit codes are returned to the caller rather than raised.

    Raises:
        CommandLaunchError: If the binary cannot be started.
    """
    cmd_str = format_command(cmd)
    logger.debug(f"💻 Running: {cmd_str}")
    try:
        result = subprocess.run(
            cmd,
            check=False,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise CommandLaunchError(f"could not start '{cmd[0]}': {e}", step=cmd_str) from e

    logger.debug(f"🟢 Output:\n{result.stdout}")
    if result.returncode != 0:
        logger.debug(f"🔴 Exit code {result.returncode}: {cmd_str}")
    return result

"""Run external commands for the pipeline."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gated_deploy.errors import CommandError

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CommandResult:
    """Exit status and decoded output of a finished command."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """Whether the command exited with status 0."""
        return self.returncode == 0


async def run_command(
    command: Sequence[str],
    cwd: Path,
) -> CommandResult:
    """Run a command to completion and capture its output.

    Raises:
        CommandError: If the command cannot be started

    """
    log.debug("Running command: %s (cwd=%s)", " ".join(command), cwd)
    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise CommandError(f"Cannot start '{command[0]}': {e}") from e

    stdout, stderr = await process.communicate()
    return CommandResult(
        returncode=process.returncode if process.returncode is not None else -1,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )


async def check_command(
    command: Sequence[str],
    cwd: Path,
) -> CommandResult:
    """Run a command and raise if it exits non-zero."""
    result = await run_command(command, cwd)
    if not result.ok:
        raise CommandError(
            f"Command '{' '.join(command)}' failed with exit code "
            f"{result.returncode}: {result.stderr.strip()}"
        )
    return result

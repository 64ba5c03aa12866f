"""Read revision metadata from the git checkout being deployed."""

import logging
from pathlib import Path

from gated_deploy.errors import CommandError, RevisionError
from gated_deploy.models.revision import RevisionSummary
from gated_deploy.process import check_command

log = logging.getLogger(__name__)


async def get_revision_summary(repo_path: Path) -> RevisionSummary:
    """Return the short commit hash and branch name of HEAD.

    On a detached HEAD, as in many CI checkouts, git reports the branch as
    ``HEAD`` and that value is recorded as is.

    Raises:
        RevisionError: If the directory is not a git checkout or git is unavailable

    """
    short_hash = await _git_query(repo_path, "rev-parse", "--short", "HEAD")
    branch = await _git_query(repo_path, "rev-parse", "--abbrev-ref", "HEAD")
    if branch == "HEAD":
        log.warning("Detached HEAD at %s, recording branch as HEAD", short_hash)

    log.info("Revision: %s on %s", short_hash, branch)
    return RevisionSummary(short_hash=short_hash, branch=branch)


async def _git_query(repo_path: Path, *args: str) -> str:
    try:
        result = await check_command(["git", *args], cwd=repo_path)
    except CommandError as e:
        raise RevisionError(f"Cannot read revision from {repo_path}: {e}") from e

    if not (value := result.stdout.strip()):
        raise RevisionError(f"git {' '.join(args)} returned no output")
    return value

"""Integration tests for revision lookup."""

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from gated_deploy.errors import RevisionError
from gated_deploy.revision import get_revision_summary


async def test_returns_short_hash_and_branch(
    git_repo: Path, git_commit: Callable[[str], str]
) -> None:
    """Reads the abbreviated HEAD commit and current branch."""
    sha = git_commit("Initial commit")

    revision = await get_revision_summary(git_repo)

    assert sha.startswith(revision.short_hash)
    assert len(revision.short_hash) >= 7
    assert revision.branch == "main"


async def test_follows_branch_switch(git_repo: Path, git_commit: Callable[[str], str]) -> None:
    """Reports the checked out branch."""
    git_commit("Initial commit")
    subprocess.run(
        ["git", "checkout", "-b", "release/1.0"],
        cwd=git_repo,
        check=True,
        capture_output=True,
    )
    sha = git_commit("Release")

    revision = await get_revision_summary(git_repo)

    assert revision.branch == "release/1.0"
    assert sha.startswith(revision.short_hash)


async def test_raises_outside_repository(tmp_path: Path) -> None:
    """Raises RevisionError instead of returning empty metadata."""
    outside = tmp_path / "not-a-repo"
    outside.mkdir()

    with pytest.raises(RevisionError, match="Cannot read revision"):
        await get_revision_summary(outside)


async def test_raises_without_commits(git_repo: Path) -> None:
    """Raises RevisionError for a repository without HEAD commit."""
    with pytest.raises(RevisionError):
        await get_revision_summary(git_repo)


async def test_warns_on_detached_head(
    git_repo: Path,
    git_commit: Callable[[str], str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Records HEAD as the branch and warns on a detached checkout."""
    sha = git_commit("Initial commit")
    subprocess.run(
        ["git", "checkout", "--detach", sha],
        cwd=git_repo,
        check=True,
        capture_output=True,
    )

    revision = await get_revision_summary(git_repo)

    assert revision.branch == "HEAD"
    assert "Detached HEAD" in caplog.text

"""Fixtures for integration tests."""

import subprocess
import sys
from pathlib import Path
from typing import Protocol

import pytest

FAKE_FRAMEWORK = '''"""Minimal test framework writing a JUnit report.

Usage: fake_framework.py SUITE REPORT

Each line of SUITE is a case: "pass NAME", "fail NAME" or "skip NAME".
A line "crash" exits without writing a report.
"""

import sys
from xml.sax.saxutils import quoteattr

suite, report = sys.argv[1], sys.argv[2]
cases = []
failed = False
with open(suite) as f:
    for line in f:
        line = line.strip()
        if not line:
            continue
        if line == "crash":
            sys.stderr.write("Error: Cannot find module\\n")
            sys.exit(2)
        status, name = line.split(" ", 1)
        body = ""
        if status == "fail":
            failed = True
            body = "<failure message=%s/>" % quoteattr(name + " failed")
        elif status == "skip":
            body = "<skipped/>"
        cases.append("<testcase classname=%s name=%s>%s</testcase>"
                     % (quoteattr(suite), quoteattr(name), body))

with open(report, "w") as f:
    f.write("<testsuite>%s</testsuite>" % "".join(cases))
sys.exit(1 if failed else 0)
'''


class CommitFn(Protocol):
    """Protocol for git commit function."""

    def __call__(self, message: str) -> str:
        """Create a commit and return its SHA."""


class WriteSuiteFn(Protocol):
    """Protocol for suite creation function."""

    def __call__(self, name: str, *cases: str) -> str:
        """Write a suite file and return its path relative to the project."""


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create an initialized git repository on branch main."""
    subprocess.run(
        ["git", "init", "--initial-branch", "main"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    return tmp_path


@pytest.fixture
def git_commit(git_repo: Path) -> CommitFn:
    """Return a function to create commits in the test repo."""

    def _commit(message: str) -> str:
        subprocess.run(
            ["git", "add", "-A"],
            cwd=git_repo,
            check=True,
            capture_output=True,
        )
        subprocess.run(
            ["git", "commit", "--allow-empty", "-m", message],
            cwd=git_repo,
            check=True,
            capture_output=True,
        )
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=git_repo,
            check=True,
            capture_output=True,
            text=True,
        )
        return result.stdout.strip()

    return _commit


@pytest.fixture
def fake_framework(git_repo: Path) -> list[str]:
    """Install the fake framework and return its test command."""
    script = git_repo / "fake_framework.py"
    script.write_text(FAKE_FRAMEWORK)
    return [sys.executable, str(script), "{suite}", "{report}"]


@pytest.fixture
def write_suite(git_repo: Path) -> WriteSuiteFn:
    """Return a function to write suite files for the fake framework."""

    def _write(name: str, *cases: str) -> str:
        suite_dir = git_repo / "test"
        suite_dir.mkdir(exist_ok=True)
        (suite_dir / name).write_text("\n".join(cases) + "\n")
        return f"test/{name}"

    return _write

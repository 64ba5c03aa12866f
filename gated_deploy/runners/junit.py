"""Test runner driving any framework that writes a JUnit XML report."""

import logging
import tempfile
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal
from xml.etree import ElementTree

from gated_deploy.errors import CommandError, SuiteLoadError
from gated_deploy.models.config import TestSuiteConfig
from gated_deploy.models.outcome import OutcomeTally
from gated_deploy.process import run_command
from gated_deploy.runners.base import TestRunner

log = logging.getLogger(__name__)

type CaseStatus = Literal["passed", "failed", "skipped"]

REPORT_FILE_NAME = "report.xml"


@dataclass(frozen=True, kw_only=True)
class CaseResult:
    """Result of one test case read from a JUnit report."""

    name: str
    status: CaseStatus
    message: str | None = None


def parse_junit_report(report_path: Path) -> Sequence[CaseResult]:
    """Read test case results from a JUnit XML report in document order.

    Cases with a ``<failure>`` or ``<error>`` child failed, cases with a
    ``<skipped>`` child did not run, everything else passed.

    Raises:
        SuiteLoadError: If the report is missing or not a JUnit document

    """
    try:
        root = ElementTree.parse(report_path).getroot()
    except FileNotFoundError as e:
        raise SuiteLoadError(f"Test report not written: {report_path}") from e
    except ElementTree.ParseError as e:
        raise SuiteLoadError(f"Malformed test report {report_path}: {e}") from e

    if root.tag not in {"testsuites", "testsuite"}:
        raise SuiteLoadError(
            f"Unexpected root element <{root.tag}> in test report {report_path}"
        )

    cases: list[CaseResult] = []
    for testcase in root.iter("testcase"):
        classname = testcase.get("classname", "")
        name = testcase.get("name", "")
        full_name = f"{classname}.{name}" if classname else name

        problem = testcase.find("failure")
        if problem is None:
            problem = testcase.find("error")

        if problem is not None:
            cases.append(
                CaseResult(
                    name=full_name,
                    status="failed",
                    message=problem.get("message") or (problem.text or "").strip(),
                )
            )
        elif testcase.find("skipped") is not None:
            cases.append(CaseResult(name=full_name, status="skipped"))
        else:
            cases.append(CaseResult(name=full_name, status="passed"))

    return cases


@dataclass(frozen=True, kw_only=True)
class JUnitSuiteRunner(TestRunner):
    """Runs a test command per suite and tallies its JUnit XML report."""

    project_dir: Path
    command: Sequence[str]
    cwd: str | None = None

    @classmethod
    def from_config(
        cls, project_dir: Path, config: TestSuiteConfig
    ) -> "JUnitSuiteRunner":
        """Create a runner from the ``tests`` configuration section."""
        return cls(project_dir=project_dir, command=config.command, cwd=config.cwd)

    @property
    def work_dir(self) -> Path:
        """Directory the test command runs in."""
        return self.project_dir / self.cwd if self.cwd else self.project_dir

    def build_command(self, suite: str, report_path: Path) -> Sequence[str]:
        """Substitute the suite and report placeholders into the test command."""
        return [
            arg.replace("{suite}", suite).replace("{report}", str(report_path))
            for arg in self.command
        ]

    async def run_suite(self, suite: str, tally: OutcomeTally) -> None:
        """Run one suite and replay its cases into the tally."""
        if not (self.work_dir / suite).exists():
            raise SuiteLoadError(f"Test suite not found: {suite}")

        with tempfile.TemporaryDirectory(prefix="gated-deploy-") as report_dir:
            report_path = Path(report_dir) / REPORT_FILE_NAME
            command = self.build_command(suite, report_path)

            try:
                result = await run_command(command, cwd=self.work_dir)
            except CommandError as e:
                raise SuiteLoadError(f"Cannot run suite {suite}: {e}") from e

            try:
                cases = parse_junit_report(report_path)
            except SuiteLoadError as e:
                raise SuiteLoadError(
                    f"Suite {suite} failed to load (exit code {result.returncode}): "
                    f"{e}\n{result.stderr.strip()}"
                ) from e

        failed = [case for case in cases if case.status == "failed"]
        if not result.ok and not failed:
            raise SuiteLoadError(
                f"Suite {suite} exited with code {result.returncode} without "
                f"reporting a failed case: {result.stderr.strip()}"
            )

        for case in cases:
            if case.status == "passed":
                tally.record_pass()
            elif case.status == "failed":
                log.warning("Test failed: %s: %s", case.name, case.message)
                tally.record_fail()
            else:
                log.debug("Test skipped: %s", case.name)

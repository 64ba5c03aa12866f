"""Pipeline coordinating the toolchain, the test run and the deployment."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from gated_deploy.deployer import Deployer
from gated_deploy.models.config import ToolchainStep
from gated_deploy.models.report import DeploymentReport
from gated_deploy.models.revision import RevisionSummary
from gated_deploy.process import check_command
from gated_deploy.revision import get_revision_summary
from gated_deploy.runners.base import TestRunner
from gated_deploy.summary import format_summary

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class PipelineResult:
    """Revision that was tested and what happened to its deployment."""

    revision: RevisionSummary
    report: DeploymentReport


@dataclass(frozen=True, kw_only=True)
class DeploymentPipeline:
    """Runs toolchain steps, tests, the deployment gate and the deployer in order."""

    project_dir: Path
    steps: Sequence[ToolchainStep]
    suites: Sequence[str]
    runner: TestRunner
    deployer: Deployer
    clock: Callable[[], datetime] = field(default=_utcnow)

    async def run(self) -> PipelineResult:
        """Execute the whole pipeline once.

        Toolchain steps run first so that the recorded revision is the one
        fetched and tested.

        Raises:
            CommandError: If a toolchain step fails
            RevisionError: If the revision cannot be read
            SuiteLoadError: If a test suite fails to load
            PublishError: If publishing fails

        """
        await self.run_steps()

        revision = await get_revision_summary(self.project_dir)

        outcome = await self.runner.run_suites(self.suites)
        summary = format_summary(outcome, revision, self.clock())

        report = await self.deployer.deploy(outcome, summary)
        return PipelineResult(revision=revision, report=report)

    async def run_steps(self) -> None:
        """Run the toolchain steps in order, stopping at the first failure."""
        for step in self.steps:
            cwd = self.project_dir / step.cwd if step.cwd else self.project_dir
            log.info("Step %s: %s", step.name, " ".join(step.command))
            await check_command(step.command, cwd=cwd)

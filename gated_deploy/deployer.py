"""Publish gated deployments and record their summary."""

import logging
from dataclasses import dataclass

from gated_deploy.errors import RecordError
from gated_deploy.gate import should_deploy
from gated_deploy.models.outcome import TestOutcome
from gated_deploy.models.report import DeploymentReport
from gated_deploy.platforms.base import DeploymentPlatform

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Deployer:
    """Deploys to a single platform when the gate approves the test outcome."""

    platform: DeploymentPlatform

    async def deploy(self, outcome: TestOutcome, summary: str) -> DeploymentReport:
        """Publish artifacts and record the summary if every test passed.

        Args:
            outcome: Aggregated result of the test run
            summary: Formatted deployment summary to record

        Returns:
            ``skipped`` when tests failed, ``deployed`` when both operations
            succeeded, ``degraded`` when the artifacts are live but the summary
            could not be recorded

        Raises:
            PublishError: If publishing the artifacts fails

        """
        if not should_deploy(outcome):
            message = f"Deploy failed: {outcome.failed} test(s) failed"
            log.warning("%s, skipping deployment", message)
            return DeploymentReport(
                status="skipped", outcome=outcome, summary=summary, message=message
            )

        log.info("All %d test(s) passed, deploying", outcome.total)
        await self.platform.publish()

        try:
            await self.record(summary)
        except RecordError as e:
            log.error("Artifacts published but summary not recorded: %s", e)
            return DeploymentReport(
                status="degraded",
                outcome=outcome,
                summary=summary,
                message=f"Deployed without summary record: {e}",
            )

        return DeploymentReport(status="deployed", outcome=outcome, summary=summary)

    async def record(self, summary: str) -> None:
        """Write the summary without publishing.

        Raises:
            RecordError: If the summary cannot be written

        """
        await self.platform.record_summary(summary)
        log.info("Recorded deployment summary: %s", summary)

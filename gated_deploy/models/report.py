"""Models for deployment results."""

from dataclasses import dataclass
from typing import Literal

from gated_deploy.models.outcome import TestOutcome

DeploymentStatus = Literal["deployed", "skipped", "degraded"]


@dataclass(frozen=True, kw_only=True)
class DeploymentReport:
    """Result of a deployment attempt.

    ``degraded`` means the artifacts were published but the summary record
    could not be written.
    """

    status: DeploymentStatus
    outcome: TestOutcome
    summary: str
    message: str | None = None

"""Format the deployment summary recorded after each run."""

from datetime import datetime, timezone

from gated_deploy.models.outcome import TestOutcome
from gated_deploy.models.revision import RevisionSummary


def format_summary(
    outcome: TestOutcome, revision: RevisionSummary, timestamp: datetime
) -> str:
    """Build the one-line summary, e.g.

    ``5/5 tests passed on 2026-10-16 12:00:00 UTC (abc1234 on main)``
    """
    utc = timestamp.astimezone(timezone.utc)
    return (
        f"{outcome.passed}/{outcome.total} tests passed on "
        f"{utc:%Y-%m-%d %H:%M:%S} UTC "
        f"({revision.short_hash} on {revision.branch})"
    )

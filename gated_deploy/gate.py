"""Deployment gate."""

from gated_deploy.models.outcome import TestOutcome


def should_deploy(outcome: TestOutcome) -> bool:
    """Deploy only when no test case failed."""
    return not outcome.has_failures

"""Tests for deployment summary formatting."""

from datetime import datetime, timedelta, timezone

from gated_deploy.models.outcome import TestOutcome
from gated_deploy.models.revision import RevisionSummary
from gated_deploy.summary import format_summary
from gated_deploy.testing.factories import RevisionSummaryFactory, TestOutcomeFactory

REVISION = RevisionSummary(short_hash="abc1234", branch="main")


def test_formats_passing_run() -> None:
    """Includes the tally, UTC timestamp, hash and branch."""
    summary = format_summary(
        TestOutcome(passed=5, failed=0),
        REVISION,
        datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone.utc),
    )

    assert summary == "5/5 tests passed on 2026-10-16 12:00:00 UTC (abc1234 on main)"


def test_formats_failing_run() -> None:
    """Counts failed cases in the total."""
    summary = format_summary(
        TestOutcome(passed=4, failed=1),
        REVISION,
        datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone.utc),
    )

    assert summary.startswith("4/5 tests passed")


def test_converts_timestamp_to_utc() -> None:
    """Renders aware timestamps from other zones in UTC."""
    summary = format_summary(
        TestOutcome(passed=1, failed=0),
        RevisionSummary(short_hash="def5678", branch="release/1.2"),
        datetime(2026, 10, 16, 14, 30, 0, tzinfo=timezone(timedelta(hours=2))),
    )

    assert "2026-10-16 12:30:00 UTC" in summary
    assert "(def5678 on release/1.2)" in summary


def test_tally_matches_outcome() -> None:
    """Reports passed over total for any outcome and revision."""
    revision = RevisionSummaryFactory.build()
    outcome = TestOutcomeFactory.build()

    summary = format_summary(outcome, revision, datetime.now(timezone.utc))

    assert summary.startswith(f"{outcome.passed}/{outcome.total} tests passed on ")
    assert summary.endswith(f"({revision.short_hash} on {revision.branch})")

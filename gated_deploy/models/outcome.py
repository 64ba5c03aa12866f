"""Models for aggregated test outcomes."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TestOutcome:
    """Pass/fail tally for one completed test run."""

    __test__ = False

    passed: int = 0
    failed: int = 0

    def __post_init__(self) -> None:
        if self.passed < 0 or self.failed < 0:
            raise ValueError("Test counts must be non-negative")

    @property
    def total(self) -> int:
        """Number of executed test cases."""
        return self.passed + self.failed

    @property
    def has_failures(self) -> bool:
        """Whether at least one test case failed."""
        return self.failed > 0


class OutcomeTally:
    """Accumulator for test case results during a single run.

    Counts only ever grow. The runner owns the tally for the duration of a run
    and hands callers the frozen TestOutcome.
    """

    def __init__(self) -> None:
        self._passed = 0
        self._failed = 0

    def record_pass(self) -> None:
        """Count one passing test case."""
        self._passed += 1

    def record_fail(self) -> None:
        """Count one failing test case."""
        self._failed += 1

    def outcome(self) -> TestOutcome:
        """Snapshot the current counts."""
        return TestOutcome(passed=self._passed, failed=self._failed)

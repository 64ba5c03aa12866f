"""Abstract base class for test runners."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from gated_deploy.models.outcome import OutcomeTally, TestOutcome

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestRunner(ABC):
    """Abstract base for test runners.

    Subclasses execute one suite at a time and report every completed case to
    the tally they are given. The tally lives only for the duration of
    ``run_suites``.
    """

    __test__ = False

    @abstractmethod
    async def run_suite(self, suite: str, tally: OutcomeTally) -> None:
        """Execute every test case of a suite.

        Args:
            suite: Suite location as given in the configuration
            tally: Accumulator receiving one pass or fail per completed case

        Raises:
            SuiteLoadError: If the suite cannot be loaded

        """

    async def run_suites(self, suites: Sequence[str]) -> TestOutcome:
        """Run all suites in order and return the aggregated outcome.

        Failing cases never stop the run; a suite load error aborts it.
        """
        tally = OutcomeTally()

        for suite in suites:
            log.info("Running suite %s", suite)
            before = tally.outcome()
            await self.run_suite(suite, tally)
            after = tally.outcome()
            log.info(
                "Suite %s finished: %d passed, %d failed",
                suite,
                after.passed - before.passed,
                after.failed - before.failed,
            )

        outcome = tally.outcome()
        log.info(
            "Test run completed: %d passed, %d failed", outcome.passed, outcome.failed
        )
        return outcome

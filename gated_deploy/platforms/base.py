"""Abstract base class for deployment platforms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class DeploymentPlatform(ABC):
    """Abstract base for deployment platforms.

    A platform publishes the project's artifacts and stores the deployment
    summary at a known location. The two operations are independent so that
    a failed summary write can be retried without publishing again.
    """

    @abstractmethod
    async def publish(self) -> None:
        """Publish the project's artifacts.

        Raises:
            PublishError: If publishing fails

        """

    @abstractmethod
    async def record_summary(self, summary: str) -> None:
        """Store the deployment summary, replacing any previous one.

        Args:
            summary: Formatted deployment summary

        Raises:
            RecordError: If the summary cannot be written

        """

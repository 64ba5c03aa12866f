"""Deployment platform backed by arbitrary shell commands."""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

from gated_deploy.errors import CommandError, PublishError, RecordError
from gated_deploy.platforms.base import DeploymentPlatform
from gated_deploy.platforms.command.config import CommandPlatformConfig
from gated_deploy.process import check_command

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CommandPlatform(DeploymentPlatform):
    """Publishes and records by running configured commands."""

    config: CommandPlatformConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: CommandPlatformConfig
    ) -> AsyncGenerator["CommandPlatform", None]:
        """Create platform; commands hold no resources between calls."""
        yield cls(config=config)

    def build_record_command(self, summary: str) -> Sequence[str]:
        """Substitute the summary into the record command."""
        return [arg.replace("{summary}", summary) for arg in self.config.record_command]

    async def publish(self) -> None:
        """Run the publish command."""
        log.info("Publishing: %s", " ".join(self.config.publish_command))
        try:
            await check_command(self.config.publish_command, cwd=Path(self.config.cwd))
        except CommandError as e:
            raise PublishError(str(e)) from e

    async def record_summary(self, summary: str) -> None:
        """Run the record command with the summary substituted."""
        log.info("Recording summary with: %s", self.config.record_command[0])
        try:
            await check_command(
                self.build_record_command(summary), cwd=Path(self.config.cwd)
            )
        except CommandError as e:
            raise RecordError(str(e)) from e

"""Firebase platform implementation."""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

import aiohttp

from gated_deploy.errors import CommandError, PublishError, RecordError
from gated_deploy.platforms.base import DeploymentPlatform
from gated_deploy.platforms.firebase.config import FirebaseConfig
from gated_deploy.process import check_command

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class FirebasePlatform(DeploymentPlatform):
    """Firebase deployment platform."""

    config: FirebaseConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: FirebaseConfig
    ) -> AsyncGenerator["FirebasePlatform", None]:
        """Create platform with managed session lifecycle."""
        headers = {
            "Authorization": f"Bearer {config.access_token.get_secret_value()}",
        }
        async with aiohttp.ClientSession(
            base_url=config.database_url,
            headers=headers,
        ) as session:
            yield cls(config=config, session=session)

    @property
    def summary_url(self) -> str:
        """Realtime Database REST path of the summary record."""
        return f"/{self.config.summary_path.strip('/')}.json"

    def deploy_command(self) -> Sequence[str]:
        """Firebase CLI invocation publishing the project."""
        command = [
            self.config.firebase_bin,
            "deploy",
            "--non-interactive",
            "--project",
            self.config.project,
        ]
        if self.config.only:
            command.extend(["--only", ",".join(self.config.only)])
        return command

    async def publish(self) -> None:
        """Publish with ``firebase deploy``."""
        log.info(
            "Publishing to Firebase: project=%s, only=%s",
            self.config.project,
            ",".join(self.config.only) or "all",
        )
        try:
            await check_command(self.deploy_command(), cwd=Path(self.config.cwd))
        except CommandError as e:
            raise PublishError(f"Firebase deploy failed: {e}") from e

    async def record_summary(self, summary: str) -> None:
        """Write the summary as a string value in the Realtime Database."""
        log.info(
            "Recording summary: database_url=%s, path=%s",
            self.config.database_url,
            self.summary_url,
        )
        try:
            async with self.session.put(self.summary_url, json=summary) as response:
                if response.status != 200:
                    text = await response.text()
                    raise RecordError(
                        f"Failed to record summary: {response.status} {text}"
                    )
        except (aiohttp.ClientError, TimeoutError) as e:
            raise RecordError(f"Failed to record summary: {e}") from e

"""Command platform manifest."""

from gated_deploy.platforms.command.config import CommandPlatformConfig
from gated_deploy.platforms.command.platform import CommandPlatform
from gated_deploy.platforms.manifest import PlatformManifest

command_manifest = PlatformManifest(
    config_cls=CommandPlatformConfig,
    platform_factory=CommandPlatform.from_config,
)

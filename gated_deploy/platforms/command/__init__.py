"""Command platform module."""

from gated_deploy.platforms.command.config import CommandPlatformConfig
from gated_deploy.platforms.command.manifest import command_manifest
from gated_deploy.platforms.command.platform import CommandPlatform

__all__ = ["CommandPlatform", "CommandPlatformConfig", "command_manifest"]

"""Loading of deployment platforms from entry points."""

from importlib.metadata import entry_points
from typing import Any

from gated_deploy.errors import PlatformNotFoundError
from gated_deploy.platforms.manifest import PlatformManifest

ENTRY_POINT_GROUP = "gated_deploy.platforms"


def load_platform_manifest(key: str) -> PlatformManifest[Any]:
    """Load a platform manifest by key.

    Args:
        key: The platform key as registered in pyproject.toml
             (e.g., "firebase", "command")

    Returns:
        The platform manifest instance

    Raises:
        PlatformNotFoundError: If no platform with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: PlatformManifest[Any] = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise PlatformNotFoundError(
        f"Platform '{key}' not found. Available platforms: {available}"
    )

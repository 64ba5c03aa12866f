"""Firebase platform manifest."""

from gated_deploy.platforms.firebase.config import FirebaseConfig
from gated_deploy.platforms.firebase.platform import FirebasePlatform
from gated_deploy.platforms.manifest import PlatformManifest

firebase_manifest = PlatformManifest(
    config_cls=FirebaseConfig,
    platform_factory=FirebasePlatform.from_config,
)

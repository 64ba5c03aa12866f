"""Firebase platform module."""

from gated_deploy.platforms.firebase.config import FirebaseConfig
from gated_deploy.platforms.firebase.manifest import firebase_manifest
from gated_deploy.platforms.firebase.platform import FirebasePlatform

__all__ = ["FirebaseConfig", "FirebasePlatform", "firebase_manifest"]

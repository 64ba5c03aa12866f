"""Configuration for Firebase platform."""

from collections.abc import Sequence

from pydantic import BaseModel, SecretStr


class FirebaseConfig(BaseModel):
    """Configuration for Firebase platform.

    Artifacts are published with the Firebase CLI; the summary is written to
    the Realtime Database REST API using an OAuth access token.
    """

    project: str
    database_url: str
    access_token: SecretStr
    summary_path: str = "deploys/latest"
    only: Sequence[str] = ()
    firebase_bin: str = "firebase"
    cwd: str = "."

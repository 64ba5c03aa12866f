"""Version control metadata attached to deployment records."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RevisionSummary:
    """Short revision hash and branch name of the deployed checkout."""

    short_hash: str
    branch: str

"""Configuration for command platform."""

from collections.abc import Sequence

from pydantic import BaseModel, Field


class CommandPlatformConfig(BaseModel):
    """Configuration for command platform.

    ``record_command`` arguments may contain a ``{summary}`` placeholder.
    """

    publish_command: Sequence[str] = Field(..., min_length=1)
    record_command: Sequence[str] = Field(..., min_length=1)
    cwd: str = "."

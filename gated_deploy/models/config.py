"""Models for the pipeline configuration loaded from gated-deploy.yaml."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import Field, field_validator

from gated_deploy.models.base import Model


class ToolchainStep(Model):
    """A single command run before the tests (fetch, install, compile)."""

    name: str = Field(..., description="Human-readable step name")
    command: Sequence[str] = Field(..., description="Command and arguments")
    cwd: str | None = Field(
        default=None, description="Working directory relative to the project root"
    )

    @field_validator("command")
    @classmethod
    def _command_not_empty(cls, value: Sequence[str]) -> Sequence[str]:
        if not value:
            raise ValueError("command must not be empty")
        return value


class TestSuiteConfig(Model):
    """How to execute the test suites."""

    __test__ = False

    command: Sequence[str] = Field(
        ...,
        description=(
            "Test command; '{suite}' and '{report}' are replaced with the suite "
            "path and the JUnit XML report path"
        ),
    )
    suites: Sequence[str] = Field(..., min_length=1, description="Suite locations")
    cwd: str | None = Field(
        default=None, description="Working directory relative to the project root"
    )

    @field_validator("command")
    @classmethod
    def _command_has_report(cls, value: Sequence[str]) -> Sequence[str]:
        if not any("{report}" in arg for arg in value):
            raise ValueError("command must reference the '{report}' placeholder")
        return value


class PlatformSettings(Model):
    """Deployment platform selection and its plugin-specific configuration."""

    key: str = Field(..., description="Platform key (firebase, command)")
    config: Mapping[str, Any] = Field(
        default_factory=dict, description="Platform configuration"
    )


class PipelineConfig(Model):
    """Complete pipeline configuration."""

    version: str = Field(..., description="Configuration schema version")
    steps: Sequence[ToolchainStep] = Field(
        default_factory=list, description="Toolchain steps run before the tests"
    )
    tests: TestSuiteConfig = Field(..., description="Test suite execution")
    platform: PlatformSettings = Field(..., description="Deployment platform")

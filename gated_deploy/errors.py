"""Exceptions raised by the deployment pipeline."""


class PipelineError(Exception):
    """Base class for errors that abort a pipeline run."""


class ConfigError(PipelineError):
    """Raised when the pipeline configuration is missing or invalid."""


class RevisionError(PipelineError):
    """Raised when revision metadata cannot be read from version control."""


class CommandError(PipelineError):
    """Raised when a toolchain command fails to start or exits non-zero."""


class SuiteLoadError(PipelineError):
    """Raised when a test suite cannot be loaded or executed.

    Distinct from failing test cases, which are reported in the outcome.
    """


class PublishError(PipelineError):
    """Raised when a platform fails to publish artifacts."""


class RecordError(PipelineError):
    """Raised when a platform fails to record the deployment summary."""


class PlatformNotFoundError(PipelineError):
    """Raised when a deployment platform is not found."""

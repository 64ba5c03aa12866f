"""Load the pipeline configuration from YAML."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gated_deploy.errors import ConfigError
from gated_deploy.models.config import PipelineConfig

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "gated-deploy.yaml"


def load_pipeline_config(
    config_path: Path,
    platform_overrides: Mapping[str, Any] | None = None,
) -> PipelineConfig:
    """Load and validate the pipeline configuration.

    Args:
        config_path: Path to the YAML configuration file
        platform_overrides: Values merged over ``platform.config``, typically
            secrets supplied by the CI environment

    Returns:
        Validated pipeline configuration

    Raises:
        ConfigError: If the file is missing, is not valid YAML or does not
            match the schema

    """
    try:
        raw = config_path.read_text()
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {config_path}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {config_path} must be a mapping")

    if platform_overrides:
        platform = dict(data.get("platform") or {})
        platform["config"] = {**(platform.get("config") or {}), **platform_overrides}
        data["platform"] = platform

    try:
        config = PipelineConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    log.debug(
        "Loaded configuration: steps=%d suites=%d platform=%s",
        len(config.steps),
        len(config.tests.suites),
        config.platform.key,
    )
    return config


def parse_platform_overrides(platform_config_json: str) -> Mapping[str, Any]:
    """Parse the JSON platform overrides given on the command line."""
    if not platform_config_json.strip():
        return {}
    try:
        overrides = json.loads(platform_config_json)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid platform config JSON: {e}") from e
    if not isinstance(overrides, dict):
        raise ConfigError("Platform config JSON must be an object")
    return overrides

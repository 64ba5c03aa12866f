"""CLI entry point for the gated deployment pipeline."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gated_deploy.config_loader import (
    DEFAULT_CONFIG_FILE,
    load_pipeline_config,
    parse_platform_overrides,
)
from gated_deploy.deployer import Deployer
from gated_deploy.errors import ConfigError, PipelineError
from gated_deploy.models.config import PlatformSettings
from gated_deploy.pipeline import DeploymentPipeline, PipelineResult
from gated_deploy.platforms.loading import load_platform_manifest
from gated_deploy.runners.junit import JUnitSuiteRunner

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_DEGRADED = 3

STATUS_SYMBOLS = {
    "deployed": "✅",
    "skipped": "❌",
    "degraded": "❗",
}


def log_results_summary(log: logging.Logger, result: PipelineResult) -> None:
    """Log a formatted summary of the test run and deployment."""
    report = result.report
    symbol = STATUS_SYMBOLS.get(report.status, "?")

    log.info("=" * 80)
    log.info("Deployment Summary:")
    log.info("=" * 80)
    log.info(
        "%s %s: %d passed, %d failed",
        symbol,
        report.status,
        report.outcome.passed,
        report.outcome.failed,
    )
    log.info("  Revision: %s on %s", result.revision.short_hash, result.revision.branch)
    log.info("  Summary: %s", report.summary)
    if report.message:
        log.info("  Message: %s", report.message)


def format_output(result: PipelineResult) -> dict[str, Any]:
    """Format the pipeline result for JSON output."""
    report = result.report
    return {
        "status": report.status,
        "total": report.outcome.total,
        "passed": report.outcome.passed,
        "failed": report.outcome.failed,
        "summary": report.summary,
        "message": report.message,
        "revision": {
            "short_hash": result.revision.short_hash,
            "branch": result.revision.branch,
        },
    }


def build_platform_config(
    manifest: Any, settings: PlatformSettings, project_dir: Path
) -> Any:
    """Validate the platform section against the plugin's configuration class.

    A ``cwd`` field is resolved against the project root so that platform
    commands run where the steps and tests ran.
    """
    values = dict(settings.config)
    if "cwd" in manifest.config_cls.model_fields:
        values["cwd"] = str(project_dir / values.get("cwd", "."))
    try:
        return manifest.config_cls(**values)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration for platform '{settings.key}': {e}"
        ) from e


async def run(
    config_path: Path,
    project_dir: Path,
    platform_overrides: Mapping[str, Any] | None = None,
    retry_record: str | None = None,
) -> int:
    """Run the pipeline and return the exit code."""
    log = logging.getLogger("gated_deploy")

    try:
        config = load_pipeline_config(config_path, platform_overrides)

        log.info("Loading platform: %s", config.platform.key)
        manifest = load_platform_manifest(config.platform.key)
        platform_config = build_platform_config(
            manifest, config.platform, project_dir
        )

        async with manifest.platform_factory(platform_config) as platform:
            deployer = Deployer(platform=platform)

            if retry_record is not None:
                log.info("Retrying summary record without publishing")
                await deployer.record(retry_record)
                print(json.dumps({"status": "recorded", "summary": retry_record}))
                return EXIT_OK

            pipeline = DeploymentPipeline(
                project_dir=project_dir,
                steps=config.steps,
                suites=config.tests.suites,
                runner=JUnitSuiteRunner.from_config(project_dir, config.tests),
                deployer=deployer,
            )
            result = await pipeline.run()
    except PipelineError as e:
        log.error("Pipeline aborted: %s", e)
        return EXIT_ERROR

    log_results_summary(log, result)
    print(json.dumps(format_output(result), indent=2))

    if result.report.status == "degraded":
        return EXIT_DEGRADED
    return EXIT_OK


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run the test suites and deploy only if every test passed"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILE),
        help=f"Path to the pipeline configuration (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=Path.cwd(),
        help="Project root the steps and tests run in (default: current directory)",
    )
    parser.add_argument(
        "--platform-config",
        default="",
        help="JSON object merged over the platform configuration",
    )
    parser.add_argument(
        "--retry-record",
        metavar="SUMMARY",
        default=None,
        help="Only record the given summary, without testing or publishing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        platform_overrides = parse_platform_overrides(args.platform_config)
    except ConfigError as e:
        logging.getLogger("gated_deploy").error("%s", e)
        sys.exit(EXIT_ERROR)

    exit_code = asyncio.run(
        run(
            config_path=args.config,
            project_dir=args.project_dir,
            platform_overrides=platform_overrides,
            retry_record=args.retry_record,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()

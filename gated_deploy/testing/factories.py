"""Test factories for generating test data."""

import random

from polyfactory import Use
from polyfactory.factories import DataclassFactory

from gated_deploy.models.outcome import TestOutcome
from gated_deploy.models.report import DeploymentReport
from gated_deploy.models.revision import RevisionSummary


class TestOutcomeFactory(DataclassFactory[TestOutcome]):
    """Factory for TestOutcome."""

    __model__ = TestOutcome

    passed = Use(random.randint, 0, 50)
    failed = Use(random.randint, 0, 50)


class RevisionSummaryFactory(DataclassFactory[RevisionSummary]):
    """Factory for RevisionSummary."""

    __model__ = RevisionSummary

    short_hash = Use(lambda: f"{random.getrandbits(28):07x}")
    branch = "main"


class DeploymentReportFactory(DataclassFactory[DeploymentReport]):
    """Factory for DeploymentReport."""

    __model__ = DeploymentReport

    status = "deployed"
    outcome = Use(TestOutcomeFactory.build, failed=0)
    message = None

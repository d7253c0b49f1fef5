"""Pytest configuration and shared fixtures for testtally tests."""

import pytest

from testtally.config import AppConfig
from testtally.model import Outcome
from testtally.reporter import Reporter
from testtally.runners.runner import Check, TestRunner, skip


@pytest.fixture
def reporter():
    """A fresh reporter in the recording state."""
    return Reporter("unit")


@pytest.fixture
def mixed_reporter(reporter):
    """Reporter holding one pass, one skip and one fail."""
    reporter.record("test_a", Outcome.PASS)
    reporter.record("test_b", Outcome.SKIP, "API not available")
    reporter.record("test_c", Outcome.FAIL, "expected 1, got 2")
    return reporter


def _ok(cfg):
    pass


def _boom(cfg):
    assert 1 == 2, "expected 1, got 2"


def _no_api(cfg):
    skip("API not available")


@pytest.fixture
def mixed_checks():
    return [Check("test_a", _ok), Check("test_b", _no_api), Check("test_c", _boom)]


@pytest.fixture
def mixed_result(mixed_checks):
    """RunResult for the pass/skip/fail trio."""
    return TestRunner(AppConfig()).run_checks("mixed", mixed_checks)

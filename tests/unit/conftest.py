"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import os
import types
import uuid

import pytest

from lambda_ack.config import AppConfig, get_config


@pytest.fixture(scope="session", autouse=True)
def _env_vars():
    """
    Ensures a deterministic environment for every test run.
    Overwrite *only* the variables needed by the handler.
    """
    original = os.environ.copy()
    os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
    os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "LambdaAckTest")
    yield
    os.environ.clear()
    os.environ.update(original)


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Each test gets a configuration built from its own environment."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


class FakeClock:
    """Returns the queued readings in order and counts how often it was read."""

    def __init__(self, *readings: float):
        self._readings = list(readings)
        self.calls = 0

    def __call__(self) -> float:
        value = self._readings[min(self.calls, len(self._readings) - 1)]
        self.calls += 1
        return value


@pytest.fixture
def make_clock():
    return FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    # 250 ms between entry and the completion entry
    return FakeClock(5.0, 5.25)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        stage="test",
        region="eu-central-1",
        service_name="lambda-ack-test",
        log_level="DEBUG",
        log_timezone="Europe/Budapest",
        metrics_namespace="LambdaAckTest",
    )


@pytest.fixture
def lambda_context():
    """A *very* small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        aws_request_id="req-" + uuid.uuid4().hex,
        function_name="lambda-ack",
        function_version="$LATEST",
        memory_limit_in_mb=128,
        invoked_function_arn="arn:aws:lambda:eu-central-1:000000000000:function:lambda-ack",
        get_remaining_time_in_millis=lambda: 30000,
    )

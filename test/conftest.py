"""
Test Configuration and Fixtures

This module provides:
- Log directory setup, before any application module reads it at import time
- The session-scoped TestClient running the real app lifespan
- In-memory state reset between tests (the equivalent of a database cleanup)
- A controllable clock for reservation expiry

Architecture:
- Unit tests (test/**/unit/): build domain objects directly, see unit/conftest.py
- Integration tests: go through HTTP with the DI container's in-memory repositories
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# loguru_io_config picks the log file name from TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.ticketing.domain.reservation_policy import ReservationPolicy  # noqa: E402


class FakeClock:
    """Callable UTC clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta: float) -> None:
        self.current += timedelta(**delta)


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from src.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# =============================================================================
# Per-test Fixtures
# =============================================================================
@pytest.fixture(autouse=True)
def clean_in_memory_state() -> Generator[None, None, None]:
    """Fresh repositories for every test; singletons are rebuilt on next use."""
    container.reset_singletons()
    yield
    container.reset_singletons()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock(datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def frozen_reservation_policy(fake_clock: FakeClock) -> Generator[ReservationPolicy, None, None]:
    """Swap the container's reservation policy for one driven by fake_clock."""
    policy = ReservationPolicy(hold_duration=timedelta(minutes=10), clock=fake_clock)
    container.reset_singletons()
    with container.reservation_policy.override(providers.Object(policy)):
        yield policy
    container.reset_singletons()


@pytest.fixture
def assert_error() -> Callable[..., None]:
    def _assert(response: Any, status_code: int, kind: str) -> None:
        assert response.status_code == status_code, (
            f'Expected {status_code}, got {response.status_code}: {response.text}'
        )
        assert response.json()['kind'] == kind

    return _assert

from datetime import datetime, timezone

import pytest

from tests.fakes import FakeClock, FakeLogger
from tests.settings import get_test_settings

NOW = datetime(2026, 2, 6, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def logger() -> FakeLogger:
    return FakeLogger()


@pytest.fixture
def test_settings():
    return get_test_settings()

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.team_ops.team_ops.container import build_container


class FakeClock:
    """Manually advanced clock so timestamps are predictable."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday; its Sunday-based week is 2024-02-11 .. 2024-02-17
    return datetime(2024, 2, 14, 10, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def container(clock):
    return build_container(manager_password="password", clock=clock)

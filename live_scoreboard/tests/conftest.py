"""
Shared fixtures for scoreboard tests.
"""

from datetime import datetime, timedelta

import pytest

MOCK_DATE = datetime(2024, 2, 1, 12, 0, 0)


class FakeClock:
    """Controllable time source; returns the same instant until advanced."""

    def __init__(self, start: datetime = MOCK_DATE):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, minutes: float = 1) -> datetime:
        self.now += timedelta(minutes=minutes)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()

"""Shared fixtures for fnkit tests."""

import pytest
from loguru import logger

from fnkit.config import settings


@pytest.fixture
def loguru_records():
    """Capture fnkit's loguru records (disabled outside of this fixture)."""
    records = []
    logger.enable("fnkit")
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="DEBUG",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)
    logger.disable("fnkit")


@pytest.fixture
def strict_settlement(monkeypatch):
    """Make a second resolve/reject raise instead of being ignored."""
    monkeypatch.setattr(settings.sequencing, "strict_settlement", True)


@pytest.fixture
def strict_advance(monkeypatch):
    """Make repeated chain advances raise instead of being ignored."""
    monkeypatch.setattr(settings.sequencing, "strict_advance", True)

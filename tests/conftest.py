"""Shared pytest configuration for all test levels."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import structlog
from hypothesis import HealthCheck, settings

from tests.test_utils.helpers import fixture_path

__all__ = ["fixture_path"]


@pytest.fixture(autouse=True)
def _reset_structlog() -> None:
    structlog.reset_defaults()


# Configure Hypothesis global settings
settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "ci",
    max_examples=100,
    deadline=5000,
)

if os.getenv("CI"):
    settings.load_profile("ci")
else:
    settings.load_profile("dev")


_LEVEL_MARKERS = {
    "unit": pytest.mark.unit,
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = item.path.relative_to(Path(__file__).resolve().parent) if item.path else None
        if rel is None:
            continue
        for level, marker in _LEVEL_MARKERS.items():
            if rel.parts[0] == level:
                item.add_marker(marker)
                break

"""Test helpers."""

from tests.test_utils.helpers.fixture import fixture_path

__all__ = ["fixture_path"]

from __future__ import annotations

from tests.test_utils.strategies.message import apply_calls, builder_calls, payloads

__all__ = ["apply_calls", "builder_calls", "payloads"]

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def _freeze(data: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(data or {}))


def _render_scalar(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True, slots=True, repr=False)
class Message:
    """Push message for the relay. Create instances with ``MessageBuilder``.

    Unset options are ``None`` so they can be told apart from an explicit
    ``False`` or ``0``. ``data`` is a read-only view over a copy owned by the
    message; passing ``None`` gives an empty payload.
    """

    collapse_key: str | None = None
    time_to_live: int | None = None
    delay_while_idle: bool | None = None
    dry_run: bool | None = None
    high_priority: bool | None = None
    data: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze(self.data))

    def __hash__(self) -> int:
        return hash(
            (
                self.collapse_key,
                self.time_to_live,
                self.delay_while_idle,
                self.dry_run,
                self.high_priority,
                frozenset(self.data.items()),
            ),
        )

    def __str__(self) -> str:
        parts = [
            f"{name}={_render_scalar(value)}"
            for name, value in (
                ("collapseKey", self.collapse_key),
                ("timeToLive", self.time_to_live),
                ("delayWhileIdle", self.delay_while_idle),
                ("dryRun", self.dry_run),
                ("highPriority", self.high_priority),
            )
            if value is not None
        ]
        if self.data:
            parts.append(json.dumps(dict(self.data), separators=(",", ":"), ensure_ascii=False))
        return f"Message({', '.join(parts)})"

    __repr__ = __str__

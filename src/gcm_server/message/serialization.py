"""Relay wire shape for a message."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gcm_server.message.models import Message

PRIORITY_HIGH = "high"
PRIORITY_NORMAL = "normal"


def to_payload(message: Message) -> dict[str, object]:
    payload: dict[str, object] = {}
    if message.collapse_key is not None:
        payload["collapse_key"] = message.collapse_key
    if message.time_to_live is not None:
        payload["time_to_live"] = message.time_to_live
    if message.delay_while_idle is not None:
        payload["delay_while_idle"] = message.delay_while_idle
    if message.dry_run is not None:
        payload["dry_run"] = message.dry_run
    if message.high_priority is not None:
        payload["priority"] = PRIORITY_HIGH if message.high_priority else PRIORITY_NORMAL
    if message.data:
        payload["data"] = dict(message.data)
    return payload


def to_json(message: Message) -> str:
    return json.dumps(to_payload(message), separators=(",", ":"), ensure_ascii=False)

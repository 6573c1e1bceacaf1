from __future__ import annotations

from typing import TYPE_CHECKING, Self

import structlog

from gcm_server.message.models import Message
from gcm_server.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gcm_server.config.models import MessageDefaults

logger = get_logger(__name__)


class MessageBuilder:
    """Fluent builder for ``Message``.

    Setters store values as given and return the builder. A builder is not
    safe to share between concurrent writers; the messages it builds are.
    """

    def __init__(self) -> None:
        self._collapse_key: str | None = None
        self._time_to_live: int | None = None
        self._delay_while_idle: bool | None = None
        self._dry_run: bool | None = None
        self._high_priority: bool | None = None
        self._data: dict[str, str] = {}

    @classmethod
    def from_defaults(cls, defaults: MessageDefaults) -> Self:
        return (
            cls()
            .collapse_key(defaults.collapse_key)
            .time_to_live(defaults.time_to_live)
            .delay_while_idle(defaults.delay_while_idle)
            .dry_run(defaults.dry_run)
            .high_priority(defaults.high_priority)
            .set_data(defaults.data)
        )

    def collapse_key(self, value: str | None) -> Self:
        self._collapse_key = value
        return self

    def time_to_live(self, value: int | None) -> Self:
        """Sets the time to live, in seconds."""
        self._time_to_live = value
        return self

    def delay_while_idle(self, value: bool | None) -> Self:
        self._delay_while_idle = value
        return self

    def dry_run(self, value: bool | None) -> Self:
        self._dry_run = value
        return self

    def high_priority(self, value: bool | None) -> Self:
        self._high_priority = value
        return self

    def add_data(self, key: str, value: str) -> Self:
        self._data[key] = value
        return self

    def set_data(self, data: Mapping[str, str]) -> Self:
        self._data = dict(data)
        return self

    def build(self) -> Message:
        message = Message(
            collapse_key=self._collapse_key,
            time_to_live=self._time_to_live,
            delay_while_idle=self._delay_while_idle,
            dry_run=self._dry_run,
            high_priority=self._high_priority,
            data=self._data,
        )
        # library callers that never configured logging get no output
        if structlog.is_configured():
            logger.debug("message_built", fields=_set_fields(message), data_size=len(message.data))
        return message


def _set_fields(message: Message) -> list[str]:
    names = ("collapse_key", "time_to_live", "delay_while_idle", "dry_run", "high_priority")
    return [name for name in names if getattr(message, name) is not None]

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

if TYPE_CHECKING:
    from collections.abc import Mapping


class MessageDefaults(BaseModel):
    """Options applied to every message built from this config.

    Values are type-checked only. Ranges are left to the relay, same as the
    builder.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    collapse_key: StrictStr | None = None
    time_to_live: StrictInt | None = None
    delay_while_idle: StrictBool | None = None
    dry_run: StrictBool | None = None
    high_priority: StrictBool | None = None
    data: dict[StrictStr, StrictStr] = Field(default_factory=dict)


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    message: MessageDefaults = Field(default_factory=MessageDefaults)

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> AppConfig:
        return cls.model_validate(data)

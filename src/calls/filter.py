"""Search criteria for listing calls."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

CallStatus = Literal[
    "started",
    "ringing",
    "answered",
    "machine",
    "completed",
    "busy",
    "cancelled",
    "failed",
    "rejected",
    "timeout",
    "unanswered",
]

DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _format_date(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(DATE_FORMAT)


class Filter(BaseModel):
    """Query parameters accepted by ``GET /v1/calls``."""

    model_config = ConfigDict(frozen=True)

    status: CallStatus | None = None
    date_start: datetime | None = None
    date_end: datetime | None = None
    page_size: int | None = Field(default=None, ge=1, le=100)
    record_index: int | None = Field(default=None, ge=0)
    order: Literal["asc", "desc"] | None = None
    conversation_uuid: str | None = None

    @model_validator(mode="after")
    def check_date_range(self) -> "Filter":
        if self.date_start and self.date_end:
            start = self.date_start if self.date_start.tzinfo else self.date_start.replace(tzinfo=timezone.utc)
            end = self.date_end if self.date_end.tzinfo else self.date_end.replace(tzinfo=timezone.utc)
            if end < start:
                raise ValueError("date_end must not be before date_start")
        return self

    def get_query(self) -> dict[str, Any]:
        query: dict[str, Any] = {}
        for name, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, datetime):
                value = _format_date(value)
            query[name] = value
        return query

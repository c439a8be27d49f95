"""Log record model, store result snapshots and the validation error."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

KNOWN_LEVELS = ("debug", "info", "warn", "error")

# Stamped by the store; a client-supplied value of the same name is replaced.
RESERVED_FIELDS = ("received_at", "id")


class ValidationError(ValueError):
    """A required input field is missing or empty."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a 'Z' suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class LogRecord:
    id: str
    level: Any
    message: Any
    received_at: str
    source: Optional[str] = None
    fields: dict = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict, record_id: str, received_at: str) -> "LogRecord":
        fields = {k: v for k, v in payload.items() if k not in RESERVED_FIELDS}
        return cls(
            id=record_id,
            level=payload["level"],
            message=payload["message"],
            received_at=received_at,
            source=payload.get("source"),
            fields=fields,
        )

    def to_dict(self) -> dict:
        doc = dict(self.fields)
        doc["level"] = self.level
        doc["message"] = self.message
        # An explicit "source": null from the client is kept as sent.
        if self.source is not None or "source" in self.fields:
            doc["source"] = self.source
        doc["received_at"] = self.received_at
        doc["id"] = self.id
        return doc


@dataclass
class LogPage:
    records: list
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total


@dataclass
class SearchResult:
    results: list
    total: int


@dataclass
class StoreStats:
    total_received: int
    by_level: dict
    last_received_at: Optional[str]
    total_logs: int
    memory_bytes: int = 0

    @property
    def memory_usage(self) -> str:
        return f"{self.memory_bytes / 1024 / 1024:.2f} MB"

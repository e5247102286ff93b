"""
Event type definitions for schemacache.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

Operation = Literal[
    "get",
    "set",
    "del",
    "mset",
    "mget",
    "mdel",
    "ttl",
    "exists",
    "keys",
    "reset",
]


class EventPriority(int, Enum):
    """Event priority levels."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class OperationContext(BaseModel):
    """
    Context of a single cache operation.

    Passed to the before-operation hook and attached to error events.
    """

    model_config = ConfigDict(frozen=True)

    operation: Operation
    """Operation name."""

    key: str | None = None
    """Logical key (without suffix); None for batch operations and reset."""

    keys: list[str] = Field(default_factory=list)
    """Logical keys of a batch operation."""

    raw_value: Any = None
    """Value as given by the caller (set) or as read from the store (get)."""

    value: Any = None
    """Serialized value for writes, parsed value for reads."""

    ttl: int | None = None
    """TTL in seconds for writes."""


class Event(BaseModel):
    """
    Base event class.

    All events must inherit from this class.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: ClassVar[str] = "event"
    """Channel the event is published on."""

    id: UUID = Field(default_factory=uuid4)
    """Unique event identifier."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    """When the event occurred."""

    source: str = "cache"
    """Component that generated the event."""

    priority: EventPriority = EventPriority.NORMAL
    """Event priority."""

    metadata: dict[str, Any] = Field(default_factory=dict)
    """Additional event metadata."""


class ErrorEvent(Event):
    """Emitted for schema violations and unparseable stored values."""

    name: ClassVar[str] = "error"

    error: Exception
    """The violation or deserialization error."""

    context: OperationContext | None = None
    """Operation during which the error occurred."""

    priority: EventPriority = EventPriority.HIGH


class CompressEvent(Event):
    """Emitted whenever compression was requested for a write."""

    name: ClassVar[str] = "compress"

    key: str
    """Logical key being written."""

    has_gzip: bool
    """Whether the compressed form was adopted."""

    value: str
    """Final string handed to the store."""


EVENT_TYPES: dict[str, type[Event]] = {
    ErrorEvent.name: ErrorEvent,
    CompressEvent.name: CompressEvent,
}

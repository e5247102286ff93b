"""
Per-cache event publishing.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from schemacache.events.bus import EventBus, EventHandler
from schemacache.events.middleware import (
    EventMiddleware,
    FilterMiddleware,
    LoggingMiddleware,
    MetricsMiddleware,
)
from schemacache.events.types import (
    EVENT_TYPES,
    CompressEvent,
    ErrorEvent,
    Event,
    EventPriority,
    OperationContext,
)

__all__ = [
    # Core
    "Event",
    "EventBus",
    "EventHandler",
    "EventPriority",
    "EVENT_TYPES",
    # Event types
    "CompressEvent",
    "ErrorEvent",
    "OperationContext",
    # Middleware
    "EventMiddleware",
    "FilterMiddleware",
    "LoggingMiddleware",
    "MetricsMiddleware",
]

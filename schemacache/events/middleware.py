"""
Middleware implementations for event processing.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from typing import Callable, Protocol

from loguru import logger

from schemacache.events.types import CompressEvent, ErrorEvent, Event


class EventMiddleware(Protocol):
    """Protocol for event middleware."""

    async def __call__(self, event: Event) -> Event | None:
        """
        Process event.

        Args:
            event: Event to process

        Returns:
            Processed event or None to stop propagation
        """
        ...


class LoggingMiddleware:
    """Middleware that logs all events."""

    __name__ = "logging_middleware"

    def __init__(self, log_level: str = "DEBUG"):
        """
        Initialize logging middleware.

        Args:
            log_level: Log level for events
        """
        self.log_level = log_level

    async def __call__(self, event: Event) -> Event:
        """Log event and pass through."""
        if isinstance(event, ErrorEvent):
            detail = f"{type(event.error).__name__}: {event.error}"
        elif isinstance(event, CompressEvent):
            detail = f"key={event.key} has_gzip={event.has_gzip}"
        else:
            detail = ""
        logger.log(
            self.log_level,
            f"Event: {event.name} from {event.source} "
            f"(priority={event.priority.name}, id={event.id}) {detail}".rstrip()
        )
        return event


class MetricsMiddleware:
    """Middleware that counts events per channel and error type."""

    __name__ = "metrics_middleware"

    def __init__(self):
        """Initialize metrics middleware."""
        self._event_counts: dict[str, int] = {}
        self._error_counts: dict[str, int] = {}
        self._compressed = 0

    async def __call__(self, event: Event) -> Event:
        """Collect metrics and pass through."""
        self._event_counts[event.name] = self._event_counts.get(event.name, 0) + 1

        if isinstance(event, ErrorEvent):
            error_type = type(event.error).__name__
            self._error_counts[error_type] = self._error_counts.get(error_type, 0) + 1
        elif isinstance(event, CompressEvent) and event.has_gzip:
            self._compressed += 1

        return event

    def get_metrics(self) -> dict:
        """Get collected metrics."""
        return {
            "event_counts": self._event_counts.copy(),
            "error_counts": self._error_counts.copy(),
            "compressed_writes": self._compressed,
            "total_events": sum(self._event_counts.values()),
        }


class FilterMiddleware:
    """Middleware that drops events failing a predicate."""

    __name__ = "filter_middleware"

    def __init__(self, predicate: Callable[[Event], bool]):
        self.predicate = predicate

    async def __call__(self, event: Event) -> Event | None:
        if self.predicate(event):
            return event
        return None

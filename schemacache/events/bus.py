"""
Event bus implementation for schemacache.

Each Cache owns its own bus, so events never cross between cache
instances.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import asyncio
import inspect
from threading import Lock
from typing import Any, Awaitable, Callable

from loguru import logger

from schemacache.events.types import Event

# Listeners may be plain callables or coroutine functions
EventHandler = Callable[[Event], Awaitable[None] | None]
Middleware = Callable[[Event], Awaitable[Event | None]]


class EventBus:
    """
    Publish/subscribe bus keyed by channel name.

    Features:
    - Sync and async listeners
    - Priority-based execution
    - Middleware support
    - Listener errors are logged, never propagated
    - Wildcard subscriptions

    Handler lists are replaced, never mutated in place, so an emit in
    flight always iterates a complete snapshot.
    """

    def __init__(self):
        """Initialize event bus."""
        self._handlers: dict[str, tuple[tuple[EventHandler, int], ...]] = {}
        self._wildcard_handlers: tuple[tuple[EventHandler, int], ...] = ()
        self._middleware: tuple[Middleware, ...] = ()
        self._lock = Lock()

    def on(
        self,
        event_name: str,
        handler: EventHandler,
        priority: int = 0,
    ) -> None:
        """
        Subscribe to a channel.

        Args:
            event_name: Channel name (``"error"`` or ``"compress"``)
            handler: Listener called with the event
            priority: Handler priority (higher = executed first)
        """
        with self._lock:
            handlers = [*self._handlers.get(event_name, ()), (handler, priority)]
            handlers.sort(key=lambda x: x[1], reverse=True)
            self._handlers = {**self._handlers, event_name: tuple(handlers)}

        logger.debug(f"Subscribed handler to {event_name} with priority {priority}")

    def off(
        self,
        event_name: str,
        handler: EventHandler,
    ) -> None:
        """
        Unsubscribe a listener from a channel.

        Args:
            event_name: Channel name
            handler: Handler to remove
        """
        with self._lock:
            handlers = self._handlers.get(event_name, ())
            remaining = tuple((h, p) for h, p in handlers if h != handler)
            updated = {k: v for k, v in self._handlers.items() if k != event_name}
            if remaining:
                updated[event_name] = remaining
            self._handlers = updated

        logger.debug(f"Unsubscribed handler from {event_name}")

    def subscribe_all(
        self,
        handler: EventHandler,
        priority: int = 0,
    ) -> None:
        """
        Subscribe to all channels (wildcard subscription).

        Args:
            handler: Listener called with every event
            priority: Handler priority
        """
        with self._lock:
            handlers = [*self._wildcard_handlers, (handler, priority)]
            handlers.sort(key=lambda x: x[1], reverse=True)
            self._wildcard_handlers = tuple(handlers)

        logger.debug(f"Subscribed wildcard handler with priority {priority}")

    def add_middleware(self, middleware: Middleware) -> None:
        """
        Add middleware to the event processing pipeline.

        Middleware receives the event and returns it (possibly replaced),
        or None to stop propagation.

        Args:
            middleware: Async middleware callable
        """
        with self._lock:
            self._middleware = (*self._middleware, middleware)
        logger.debug(f"Added middleware: {getattr(middleware, '__name__', middleware)}")

    def listeners(self, event_name: str) -> list[EventHandler]:
        """Listeners currently registered for ``event_name``."""
        return [h for h, _ in self._handlers.get(event_name, ())]

    async def emit(self, event: Event) -> None:
        """
        Emit an event to all subscribed handlers.

        Handlers are executed in priority order. Wildcard handlers
        are executed after channel handlers.

        Args:
            event: Event to emit
        """
        logger.debug(f"Emitting event: {event.name} (id={event.id})")

        # Snapshot everything once
        middleware = self._middleware
        processed_event = event
        for step in middleware:
            try:
                processed_event = await step(processed_event)
                if processed_event is None:
                    logger.debug(f"Middleware stopped event propagation: {event.id}")
                    return
            except Exception as e:
                logger.error(f"Middleware error: {e}")
                continue

        specific_handlers = self._handlers.get(processed_event.name, ())
        all_handlers = specific_handlers + self._wildcard_handlers

        if not all_handlers:
            logger.debug(f"No handlers for event: {processed_event.name}")
            return

        tasks = [
            self._execute_handler(handler, processed_event)
            for handler, _ in all_handlers
        ]
        await asyncio.gather(*tasks)

    async def _execute_handler(
        self,
        handler: EventHandler,
        event: Event,
    ) -> Any:
        """
        Execute a single event handler with error handling.

        Args:
            handler: Handler function
            event: Event to handle

        Returns:
            Handler result or None if error
        """
        name = getattr(handler, "__name__", repr(handler))
        try:
            result = handler(event)
            if inspect.isawaitable(result):
                result = await result
            logger.trace(f"Handler executed successfully: {name}")
            return result
        except Exception as e:
            logger.error(f"Error in event handler {name} for event {event.name}: {e}")
            return None

    def clear(self) -> None:
        """Clear all handlers and middleware."""
        with self._lock:
            self._handlers = {}
            self._wildcard_handlers = ()
            self._middleware = ()
        logger.debug("Event bus cleared")

    def get_handler_count(self) -> int:
        """Get total number of registered handlers."""
        specific_count = sum(len(handlers) for handlers in self._handlers.values())
        return specific_count + len(self._wildcard_handlers)

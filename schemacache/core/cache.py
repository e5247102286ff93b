"""
Cache operation pipeline.

Wraps a raw string store with key suffixing, advisory schema validation,
JSON serialization, optional gzip compression, a before-operation hook
and per-instance events.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import fnmatch
from collections.abc import Mapping
from typing import Any, Callable, Iterable

from loguru import logger

from schemacache.config.settings import SchemaCacheSettings, get_settings
from schemacache.core.codec import (
    decompress,
    is_compressed,
    maybe_compress,
    parse,
    stringify,
)
from schemacache.events.bus import EventBus, EventHandler
from schemacache.events.types import (
    EVENT_TYPES,
    CompressEvent,
    ErrorEvent,
    Event,
    OperationContext,
)
from schemacache.exceptions import DeserializationError, SchemaViolation
from schemacache.interfaces.store import StoreProtocol
from schemacache.schema.compiler import CompiledSchema, compile_schema
from schemacache.schema.validator import validate_value
from schemacache.stores.memory import MemoryStore
from schemacache.stores.redis import RedisStore

BeforeOperationHook = Callable[[OperationContext], None]

DEFAULT_TTL = 60


def _resolve_hook(hooks: Mapping[str, Any] | None) -> BeforeOperationHook | None:
    if not hooks:
        return None
    return hooks.get("before_operation") or hooks.get("beforeOperation")


class Cache:
    """
    Schema-aware cache over a StoreProtocol backend.

    Schema violations and unparseable stored values never fail a call;
    they are published on the ``error`` channel. Only serialization
    failures and store errors reach the caller.

    Example:
        ```python
        cache = Cache(MemoryStore(), schema={"user:*": {"type": "object"}})
        cache.on("error", lambda event: print(event.error))
        await cache.set("user:1", {"name": "Ada"})
        ```
    """

    def __init__(
        self,
        store: StoreProtocol,
        *,
        ttl: int = DEFAULT_TTL,
        suffix: str = "",
        schema: Mapping[str, Any] | CompiledSchema | None = None,
        hooks: Mapping[str, Any] | None = None,
        gzip: bool = False,
        event_bus: EventBus | None = None,
    ):
        """
        Initialize cache.

        Args:
            store: Backend store
            ttl: Default TTL in seconds for writes
            suffix: Appended to every key before it reaches the store
            schema: Schema declaration (or compiled schema); None disables validation
            hooks: ``{"before_operation": callable}``
            gzip: Default compression setting for ``set``
            event_bus: Bus to publish on; a private one is created by default
        """
        self.store = store
        self.default_ttl = ttl
        self.suffix = suffix
        self.gzip = gzip
        if isinstance(schema, CompiledSchema):
            self.schema = schema or None
        else:
            self.schema = compile_schema(schema) if schema else None
        self.before_operation = _resolve_hook(hooks)
        self.events = event_bus or EventBus()

        logger.debug(
            f"Cache created over {type(store).__name__} "
            f"(ttl={ttl}, suffix={suffix!r}, rules={len(self.schema or ())})"
        )

    # Event registration

    def on(self, event_name: str, listener: EventHandler) -> None:
        """Subscribe ``listener`` to ``"error"`` or ``"compress"`` events."""
        if event_name not in EVENT_TYPES:
            raise ValueError(f"Unknown event: {event_name}")
        self.events.on(event_name, listener)

    def off(self, event_name: str, listener: EventHandler) -> None:
        """Remove a listener added with :meth:`on`."""
        if event_name not in EVENT_TYPES:
            raise ValueError(f"Unknown event: {event_name}")
        self.events.off(event_name, listener)

    # Internals

    def _key(self, key: str) -> str:
        return f"{key}{self.suffix}"

    def _fire(self, context: OperationContext) -> None:
        if self.before_operation is not None:
            self.before_operation(context)

    def _resolve_ttl(self, ttl: int | None) -> int:
        return self.default_ttl if ttl is None else ttl

    def _validate_silently(
        self,
        operation: str,
        key: str,
        value: Any,
        ttl: int,
    ) -> list[Event]:
        """Validate without awaiting; a violation is returned as a pending event."""
        if not self.schema:
            return []

        try:
            validate_value(self.schema, key, value, "", ttl)
        except SchemaViolation as e:
            logger.warning(f"Schema violation on {operation} {key}: {e}")
            return [
                ErrorEvent(
                    source="schema",
                    error=e,
                    context=OperationContext(
                        operation=operation,
                        key=key,
                        raw_value=value,
                        ttl=ttl,
                    ),
                )
            ]
        return []

    async def _publish(self, pending: list[Event]) -> None:
        for event in pending:
            await self.events.emit(event)

    async def _report_read_error(
        self,
        operation: str,
        key: str,
        raw: str,
        error: DeserializationError,
    ) -> None:
        logger.warning(f"Cannot decode {operation} value for {self._key(key)}: {error}")
        await self.events.emit(
            ErrorEvent(
                source="codec",
                error=error,
                context=OperationContext(
                    operation=operation,
                    key=key,
                    raw_value=raw,
                    value=raw,
                ),
                metadata={"store_key": self._key(key)},
            )
        )

    async def _decode(self, operation: str, key: str, raw: Any) -> Any:
        """Decompress and parse a stored string; errors become events."""
        if raw is None:
            return None

        text = raw
        if is_compressed(raw):
            try:
                text = decompress(raw)
            except DeserializationError as e:
                await self._report_read_error(operation, key, raw, e)
                return raw

        error, value = parse(text)
        if error is not None:
            await self._report_read_error(operation, key, raw, error)
            return raw
        return value

    # Operations

    async def set(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
        *,
        gzip: bool | None = None,
        nx: bool = False,
    ) -> None:
        """
        Store a value.

        Args:
            key: Logical key
            value: JSON-representable value
            ttl: TTL in seconds (None = cache default, 0 = no expiry)
            gzip: Compress when that makes the stored string shorter
                (None = cache default)
            nx: Only write if the key does not exist yet

        Raises:
            SerializationError: Value cannot be serialized
        """
        ttl = self._resolve_ttl(ttl)
        pending = self._validate_silently("set", key, value, ttl)

        # Events are published once the store call has returned or raised
        try:
            text = stringify(value)
            use_gzip = self.gzip if gzip is None else gzip

            if use_gzip:
                has_gzip, text = maybe_compress(text)
                pending.append(CompressEvent(key=key, has_gzip=has_gzip, value=text))

            self._fire(
                OperationContext(
                    operation="set",
                    key=key,
                    raw_value=value,
                    value=text,
                    ttl=ttl,
                )
            )
            await self.store.set(self._key(key), text, ttl, nx=nx)
            logger.debug(f"Cache set: {self._key(key)} (ttl={ttl}, length={len(text)})")
        finally:
            await self._publish(pending)

    async def get(self, key: str, *, parse: bool = True) -> Any:
        """
        Read a value.

        Args:
            key: Logical key
            parse: False returns the stored string untouched

        Returns:
            Parsed value, the raw string if it cannot be parsed, or None
        """
        raw = await self.store.get(self._key(key))
        logger.debug(f"Cache {'hit' if raw is not None else 'miss'}: {self._key(key)}")

        value = raw if not parse else await self._decode("get", key, raw)

        self._fire(
            OperationContext(
                operation="get",
                key=key,
                raw_value=raw,
                value=value,
            )
        )
        return value

    async def mset(
        self,
        pairs: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: int | None = None,
    ) -> None:
        """
        Store several values with one shared TTL in a single store call.

        Raises:
            SerializationError: Any value cannot be serialized
        """
        items = list(pairs.items()) if isinstance(pairs, Mapping) else list(pairs)
        ttl = self._resolve_ttl(ttl)

        pending: list[Event] = []
        for key, value in items:
            pending.extend(self._validate_silently("mset", key, value, ttl))

        try:
            serialized = [(key, stringify(value)) for key, value in items]

            self._fire(
                OperationContext(
                    operation="mset",
                    keys=[key for key, _ in items],
                    raw_value=[value for _, value in items],
                    value=serialized,
                    ttl=ttl,
                )
            )
            await self.store.mset([(self._key(key), text) for key, text in serialized], ttl)
        finally:
            await self._publish(pending)

    async def mget(self, *keys: str) -> list[Any]:
        """Read several values in one store call, in request order."""
        raws = await self.store.mget(*(self._key(key) for key in keys))
        values = [
            await self._decode("mget", key, raw)
            for key, raw in zip(keys, raws)
        ]

        self._fire(
            OperationContext(
                operation="mget",
                keys=list(keys),
                raw_value=list(raws),
                value=values,
            )
        )
        return values

    async def delete(self, key: str) -> None:
        self._fire(OperationContext(operation="del", key=key))
        await self.store.delete(self._key(key))

    async def mdel(self, *keys: str) -> None:
        self._fire(OperationContext(operation="mdel", keys=list(keys)))
        await self.store.mdel(*(self._key(key) for key in keys))

    async def ttl(self, key: str) -> int:
        self._fire(OperationContext(operation="ttl", key=key))
        return await self.store.ttl(self._key(key))

    async def exists(self, key: str) -> int:
        self._fire(OperationContext(operation="exists", key=key))
        return await self.store.exists(self._key(key))

    async def keys(self, pattern: str = "*") -> list[str]:
        """
        List logical keys matching a glob pattern.

        Only keys carrying this cache's suffix are returned, with the
        suffix removed.
        """
        self._fire(OperationContext(operation="keys", key=pattern))
        if not self.suffix:
            return await self.store.keys(pattern)

        stored = await self.store.keys(f"{pattern}*")
        logical = [key[: -len(self.suffix)] for key in stored if key.endswith(self.suffix)]
        return [key for key in logical if fnmatch.fnmatchcase(key, pattern)]

    async def reset(self) -> None:
        self._fire(OperationContext(operation="reset"))
        await self.store.reset()


def create_cache(
    store: StoreProtocol,
    settings: SchemaCacheSettings | None = None,
    *,
    schema: Mapping[str, Any] | CompiledSchema | None = None,
    hooks: Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Cache:
    """
    Build a Cache from settings.

    Args:
        store: Backend store
        settings: Settings (defaults to environment settings)
        schema: Schema declaration
        hooks: ``{"before_operation": callable}``
        **overrides: ``ttl``, ``suffix``, ``gzip`` or ``event_bus``,
            taking precedence over settings

    Returns:
        Configured Cache
    """
    settings = settings or get_settings()
    options = {
        "ttl": settings.ttl,
        "suffix": settings.suffix,
        "gzip": settings.gzip,
        **overrides,
    }
    return Cache(store, schema=schema, hooks=hooks, **options)


def create_memory_cache(
    settings: SchemaCacheSettings | None = None,
    **kwargs: Any,
) -> Cache:
    """Build a Cache over a new MemoryStore sized from settings."""
    settings = settings or get_settings()
    store = MemoryStore(max_size=settings.memory_max_size, default_ttl=settings.ttl)
    return create_cache(store, settings, **kwargs)


def create_redis_cache(
    settings: SchemaCacheSettings | None = None,
    url: str | None = None,
    **kwargs: Any,
) -> Cache:
    """
    Build a Cache over a RedisStore.

    Raises:
        ValueError: No URL given and none configured
    """
    settings = settings or get_settings()
    url = url or settings.redis_url
    if not url:
        raise ValueError("Redis URL not configured (set SCHEMACACHE_REDIS_URL)")
    store = RedisStore.from_url(url, default_ttl=settings.ttl)
    return create_cache(store, settings, **kwargs)

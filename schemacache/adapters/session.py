"""
Session store adapter.

Exposes a narrow session API (get/set/touch/destroy) on top of a Cache
by composition; the wrapped cache and its store are never modified.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from typing import Any

from loguru import logger

from schemacache.core.cache import Cache

DEFAULT_PREFIX = "sess:"


class SessionStore:
    """Session persistence backed by a Cache."""

    def __init__(
        self,
        cache: Cache,
        prefix: str = DEFAULT_PREFIX,
        ttl: int | None = None,
        gzip: bool = False,
    ):
        """
        Initialize session store.

        Args:
            cache: Cache to persist sessions in
            prefix: Prepended to every session id
            ttl: Session lifetime in seconds (None = cache default)
            gzip: Compress session payloads when smaller
        """
        self._cache = cache
        self.prefix = prefix
        self.ttl = ttl
        self.gzip = gzip

    def _key(self, sid: str) -> str:
        return f"{self.prefix}{sid}"

    def _ttl_for(self, session: dict[str, Any], ttl: int | None) -> int | None:
        if ttl is not None:
            return ttl

        # Honour an explicit cookie maxAge (milliseconds) when present
        cookie = session.get("cookie") if isinstance(session, dict) else None
        if isinstance(cookie, dict):
            max_age = cookie.get("maxAge") or cookie.get("max_age")
            if isinstance(max_age, (int, float)) and max_age > 0:
                return max(1, int(max_age // 1000))
        return self.ttl

    async def get(self, sid: str) -> dict[str, Any] | None:
        """Load a session, or None if absent or unreadable."""
        session = await self._cache.get(self._key(sid))
        if session is not None and not isinstance(session, dict):
            logger.warning(f"Discarding malformed session {sid}")
            return None
        return session

    async def set(self, sid: str, session: dict[str, Any], ttl: int | None = None) -> None:
        """Persist a session, replacing any previous state."""
        await self._cache.set(
            self._key(sid),
            session,
            self._ttl_for(session, ttl),
            gzip=self.gzip,
        )

    async def touch(self, sid: str, session: dict[str, Any], ttl: int | None = None) -> None:
        """Refresh a session's lifetime if it still exists."""
        if await self._cache.exists(self._key(sid)):
            await self.set(sid, session, ttl)

    async def destroy(self, sid: str) -> None:
        """Remove a session."""
        await self._cache.delete(self._key(sid))

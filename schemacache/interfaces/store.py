"""
Store protocol: the capability contract a cache backend must satisfy.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StoreProtocol(Protocol):
    """
    Protocol for raw string stores.

    The cache pipeline only ever hands strings to a store and expects
    strings (or None) back.
    """

    async def get(
        self,
        key: str,
    ) -> str | None:
        """
        Get raw value.

        Args:
            key: Store key

        Returns:
            Stored string or None if not found/expired
        """
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
        nx: bool = False,
    ) -> None:
        """
        Set raw value.

        Args:
            key: Store key
            value: Serialized value
            ttl: Time-to-live in seconds (None = store default, 0 = no expiry)
            nx: Only write if the key is absent; silently no-op otherwise
        """
        ...

    async def delete(
        self,
        key: str,
    ) -> None:
        """Delete a key."""
        ...

    async def mset(
        self,
        pairs: list[tuple[str, str]],
        ttl: int | None = None,
    ) -> None:
        """
        Set several values in one call, sharing one TTL.

        Args:
            pairs: ``(key, value)`` pairs
            ttl: Time-to-live in seconds
        """
        ...

    async def mget(
        self,
        *keys: str,
    ) -> list[str | None]:
        """
        Get several values in one call.

        Returns:
            Values in the same order as ``keys``; None for missing keys
        """
        ...

    async def mdel(
        self,
        *keys: str,
    ) -> None:
        """Delete several keys in one call."""
        ...

    async def ttl(
        self,
        key: str,
    ) -> int:
        """
        Remaining time-to-live.

        Returns:
            Seconds remaining, -1 if the key never expires, -2 if missing
        """
        ...

    async def exists(
        self,
        key: str,
    ) -> int:
        """Return 1 if the key exists, else 0."""
        ...

    async def keys(
        self,
        pattern: str = "*",
    ) -> list[str]:
        """
        List keys matching a glob pattern.

        Args:
            pattern: Pattern to match (e.g., "user:*")
        """
        ...

    async def reset(self) -> None:
        """Remove every entry."""
        ...

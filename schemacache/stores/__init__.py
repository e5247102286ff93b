"""
Store backends.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from schemacache.stores.memory import MemoryStore
from schemacache.stores.redis import RedisStore

__all__ = [
    "MemoryStore",
    "RedisStore",
]

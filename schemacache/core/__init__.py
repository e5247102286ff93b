"""
Cache pipeline and wire codec.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from schemacache.core.cache import (
    Cache,
    create_cache,
    create_memory_cache,
    create_redis_cache,
)
from schemacache.core.codec import GZIP_FLAG

__all__ = [
    "Cache",
    "GZIP_FLAG",
    "create_cache",
    "create_memory_cache",
    "create_redis_cache",
]

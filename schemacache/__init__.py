"""
schemacache: schema-validated, observable caching over pluggable stores.

Wraps an in-memory LRU or a Redis backend with advisory schema
validation, before-operation hooks, per-cache events and optional
gzip compression of large values.

Author: Yobie Benjamin
Date: 2026-10-18
"""

__version__ = "0.1.0"
__author__ = "Yobie Benjamin"
__license__ = "Apache-2.0"

from schemacache.adapters.session import SessionStore
from schemacache.core.cache import (
    Cache,
    create_cache,
    create_memory_cache,
    create_redis_cache,
)
from schemacache.events.types import CompressEvent, ErrorEvent, OperationContext
from schemacache.exceptions import (
    DeserializationError,
    NoMatchingRule,
    SchemaCacheError,
    SchemaViolation,
    SerializationError,
    TTLExceeded,
    TypeMismatch,
)
from schemacache.schema.compiler import compile_schema
from schemacache.stores.memory import MemoryStore
from schemacache.stores.redis import RedisStore
from schemacache.utils.logging import get_logger

__all__ = [
    "Cache",
    "create_cache",
    "create_memory_cache",
    "create_redis_cache",
    "compile_schema",
    "MemoryStore",
    "RedisStore",
    "SessionStore",
    "CompressEvent",
    "ErrorEvent",
    "OperationContext",
    "SchemaCacheError",
    "SerializationError",
    "DeserializationError",
    "SchemaViolation",
    "NoMatchingRule",
    "TTLExceeded",
    "TypeMismatch",
    "get_logger",
]

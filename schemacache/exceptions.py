"""
schemacache exceptions.

Author: Yobie Benjamin
Date: 2026-10-18
"""


class SchemaCacheError(Exception):
    """Base exception for all schemacache errors."""
    
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SerializationError(SchemaCacheError):
    """Raised when a value cannot be converted to its stored string form."""
    pass


class DeserializationError(SchemaCacheError):
    """Raised (and reported via events) when a stored string cannot be parsed."""
    
    def __init__(
        self,
        message: str,
        raw_value: str | None = None,
        details: dict | None = None
    ):
        super().__init__(message, details)
        self.raw_value = raw_value


class SchemaViolation(SchemaCacheError):
    """Base class for schema validation failures."""
    
    def __init__(
        self,
        message: str,
        path: str,
        details: dict | None = None
    ):
        super().__init__(message, details)
        self.path = path


class NoMatchingRule(SchemaViolation):
    """Raised when no schema rule resolves for a key."""
    pass


class TTLExceeded(SchemaViolation):
    """Raised when a write TTL is greater than the rule's max TTL."""
    
    def __init__(
        self,
        message: str,
        path: str,
        ttl: int,
        max_ttl: int,
        details: dict | None = None
    ):
        super().__init__(message, path, details)
        self.ttl = ttl
        self.max_ttl = max_ttl


class TypeMismatch(SchemaViolation):
    """Raised when a value does not have the kind its rule declares."""
    
    def __init__(
        self,
        message: str,
        path: str,
        expected: str,
        details: dict | None = None
    ):
        super().__init__(message, path, details)
        self.expected = expected

"""
Schema compilation and validation for cached values.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from schemacache.schema.compiler import (
    CompiledSchema,
    KeyPattern,
    SchemaKind,
    SchemaNode,
    compile_node,
    compile_schema,
)
from schemacache.schema.validator import validate_value

__all__ = [
    "CompiledSchema",
    "KeyPattern",
    "SchemaKind",
    "SchemaNode",
    "compile_node",
    "compile_schema",
    "validate_value",
]

"""
Schema compiler.

Turns a user-declared schema (a mapping of key patterns to rule
declarations) into an immutable, ordered rule set used at validation time.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

WILDCARD = "*"


class SchemaKind(str, Enum):
    """Value kinds a rule can require."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    ANY = "any"

    @classmethod
    def from_declaration(cls, value: Any) -> "SchemaKind":
        """Map a declared ``type`` to a kind; missing or unknown types are ANY."""
        if isinstance(value, SchemaKind):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.ANY


@dataclass(frozen=True)
class KeyPattern:
    """A literal key or a ``*`` wildcard pattern."""

    raw: str
    regex: re.Pattern | None = field(default=None, compare=False, repr=False)

    @classmethod
    def parse(cls, raw: str) -> "KeyPattern":
        if WILDCARD not in raw:
            return cls(raw)

        body = ".*".join(re.escape(part) for part in raw.split(WILDCARD))
        return cls(raw, re.compile(body, re.DOTALL))

    @property
    def is_wildcard(self) -> bool:
        return self.regex is not None

    @property
    def specificity(self) -> int:
        """Number of literal (non-``*``) characters."""
        return len(self.raw) - self.raw.count(WILDCARD)

    def matches(self, key: str) -> bool:
        if self.regex is None:
            return key == self.raw
        return self.regex.fullmatch(key) is not None


@dataclass(frozen=True)
class SchemaNode:
    """A compiled validation rule."""

    kind: SchemaKind = SchemaKind.ANY
    max_ttl: int | None = None
    properties: "CompiledSchema | None" = None


@dataclass(frozen=True)
class CompiledSchema:
    """
    Ordered rule set.

    Literal patterns are looked up by exact key; wildcard patterns are
    kept sorted by descending specificity so the first match wins.
    """

    literals: Mapping[str, SchemaNode] = field(
        default_factory=lambda: MappingProxyType({})
    )
    wildcards: tuple[tuple[KeyPattern, SchemaNode], ...] = ()

    def __len__(self) -> int:
        return len(self.literals) + len(self.wildcards)

    def __bool__(self) -> bool:
        return len(self) > 0

    def rules(self) -> list[tuple[KeyPattern, SchemaNode]]:
        """All rules in resolution order."""
        ordered = [(KeyPattern(key), node) for key, node in self.literals.items()]
        ordered.extend(self.wildcards)
        return ordered

    def resolve(self, key: str) -> SchemaNode | None:
        """Find the rule applying to ``key``, or None."""
        node = self.literals.get(key)
        if node is not None:
            return node

        for pattern, candidate in self.wildcards:
            if pattern.matches(key):
                return candidate
        return None


def _read_max_ttl(declaration: Mapping) -> int | None:
    max_ttl = declaration.get("maxTTL", declaration.get("max_ttl"))
    if isinstance(max_ttl, bool) or not isinstance(max_ttl, (int, float)):
        return None
    if max_ttl <= 0:
        return None
    return int(max_ttl)


def compile_node(declaration: Any) -> SchemaNode:
    """
    Compile a single rule declaration.

    Args:
        declaration: Mapping with optional ``type``, ``maxTTL`` and,
            for objects, ``properties``; or an already compiled node

    Returns:
        Compiled SchemaNode (ANY for shapes that declare nothing)
    """
    if isinstance(declaration, SchemaNode):
        return declaration
    if not isinstance(declaration, Mapping):
        return SchemaNode()

    kind = SchemaKind.from_declaration(declaration.get("type"))
    properties = None
    raw_properties = declaration.get("properties")
    if kind is SchemaKind.OBJECT and isinstance(raw_properties, Mapping):
        properties = compile_schema(raw_properties)

    return SchemaNode(
        kind=kind,
        max_ttl=_read_max_ttl(declaration),
        properties=properties,
    )


def compile_schema(raw_schema: Mapping[str, Any] | None) -> CompiledSchema:
    """
    Compile a schema declaration into a CompiledSchema.

    Args:
        raw_schema: Mapping of key pattern to rule declaration

    Returns:
        Immutable rule set; empty when ``raw_schema`` is empty or None
    """
    if not raw_schema:
        return CompiledSchema()

    literals: dict[str, SchemaNode] = {}
    wildcards: list[tuple[KeyPattern, SchemaNode]] = []

    for raw_key, declaration in raw_schema.items():
        pattern = KeyPattern.parse(str(raw_key))
        node = compile_node(declaration)
        if pattern.is_wildcard:
            wildcards.append((pattern, node))
        else:
            literals[pattern.raw] = node

    # Stable sort keeps declaration order between equally specific patterns
    wildcards.sort(key=lambda item: item[0].specificity, reverse=True)

    return CompiledSchema(
        literals=MappingProxyType(literals),
        wildcards=tuple(wildcards),
    )

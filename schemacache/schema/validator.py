"""
Schema matcher and validator.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from collections.abc import Mapping
from typing import Any, Callable

from schemacache.exceptions import NoMatchingRule, TTLExceeded, TypeMismatch
from schemacache.schema.compiler import CompiledSchema, SchemaKind


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


KIND_CHECKERS: dict[SchemaKind, Callable[[Any], bool]] = {
    SchemaKind.STRING: lambda value: isinstance(value, str),
    SchemaKind.NUMBER: _is_number,
    SchemaKind.BOOLEAN: lambda value: isinstance(value, bool),
    SchemaKind.OBJECT: lambda value: isinstance(value, Mapping),
    SchemaKind.ARRAY: lambda value: isinstance(value, (list, tuple)),
}


def validate_value(
    schema: CompiledSchema,
    key: str,
    value: Any,
    path: str = "",
    ttl: int | None = None,
) -> None:
    """
    Validate ``value`` stored under ``key`` against ``schema``.

    Object values with declared properties are checked key by key, using
    the value's own keys so undeclared fields still need a matching rule.
    ``None`` values skip the kind check but still need a rule.

    Args:
        schema: Compiled rule set
        key: Key (or property name) being validated
        value: Candidate value
        path: Dotted path of the parent, empty at the top level
        ttl: Write TTL in seconds, checked against ``max_ttl``

    Raises:
        NoMatchingRule: No rule resolves for ``key``
        TTLExceeded: ``ttl`` is greater than the rule's ``max_ttl``
        TypeMismatch: Value is not of the declared kind
    """
    current_path = f"{path}.{key}" if path else key
    rule = schema.resolve(key)

    if rule is None:
        raise NoMatchingRule(
            f"No match schema for key {current_path}",
            path=current_path,
        )

    if ttl and rule.max_ttl and ttl > rule.max_ttl:
        raise TTLExceeded(
            f"ttl for key {current_path} is greater than max ttl",
            path=current_path,
            ttl=ttl,
            max_ttl=rule.max_ttl,
        )

    if value is None:
        return

    checker = KIND_CHECKERS.get(rule.kind)
    if checker is None:
        return

    if not checker(value):
        raise TypeMismatch(
            f"value for key {current_path} is not {rule.kind.value}",
            path=current_path,
            expected=rule.kind.value,
        )

    if rule.kind is SchemaKind.OBJECT and rule.properties is not None:
        for sub_key, sub_value in value.items():
            validate_value(rule.properties, str(sub_key), sub_value, current_path, ttl)

"""
Wire codec for cached values.

Values are stored as UTF-8 strings: either compact JSON, or the JSON
gzipped and base64 encoded behind a fixed marker prefix.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import base64
import binascii
import gzip
import json
import zlib
from typing import Any

from schemacache.exceptions import DeserializationError, SerializationError

GZIP_FLAG = "_gzip_"


def stringify(value: Any) -> str:
    """
    Serialize a value to its canonical string form.

    Raises:
        SerializationError: Value is not JSON representable
    """
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Value of type {type(value).__name__} cannot be serialized: {e}",
            details={"type": type(value).__name__},
        ) from e


def parse(raw: str) -> tuple[DeserializationError | None, Any]:
    """
    Parse a stored string.

    Returns:
        ``(None, value)`` on success, ``(error, raw)`` on failure
    """
    try:
        return None, json.loads(raw)
    except (TypeError, ValueError) as e:
        return DeserializationError(f"Cannot parse cached value: {e}", raw_value=raw), raw


def is_compressed(raw: Any) -> bool:
    return isinstance(raw, str) and raw.startswith(GZIP_FLAG)


def compress(text: str) -> str:
    """Gzip ``text`` and return the marker-prefixed base64 form."""
    payload = base64.b64encode(gzip.compress(text.encode("utf-8"))).decode("ascii")
    return f"{GZIP_FLAG}{payload}"


def decompress(raw: str) -> str:
    """
    Reverse :func:`compress`.

    Raises:
        DeserializationError: Payload is not valid base64 gzip data
    """
    try:
        data = base64.b64decode(raw[len(GZIP_FLAG):], validate=True)
        return gzip.decompress(data).decode("utf-8")
    except (binascii.Error, OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
        raise DeserializationError(
            f"Cannot decompress cached value: {e}", raw_value=raw
        ) from e


def maybe_compress(text: str) -> tuple[bool, str]:
    """
    Compress ``text`` only when that makes it strictly shorter.

    Returns:
        ``(adopted, stored_string)``
    """
    compressed = compress(text)
    if len(compressed) < len(text):
        return True, compressed
    return False, text

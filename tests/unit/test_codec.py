"""
Tests for the wire codec.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import base64
import gzip

import pytest

from schemacache.core.codec import (
    GZIP_FLAG,
    compress,
    decompress,
    is_compressed,
    maybe_compress,
    parse,
    stringify,
)
from schemacache.exceptions import DeserializationError, SerializationError


class TestStringify:
    """Test canonical serialization."""
    
    def test_compact_json(self):
        """Test output has no insignificant whitespace."""
        assert stringify({"a": 1}) == '{"a":1}'
        assert stringify([1, "x", None, True]) == '[1,"x",null,true]'
    
    def test_unicode_kept(self):
        """Test non-ASCII text is not escaped."""
        assert stringify("héllo") == '"héllo"'
    
    def test_unserializable_value(self):
        """Test unserializable values raise SerializationError."""
        with pytest.raises(SerializationError) as exc_info:
            stringify({"when": object()})
        
        assert exc_info.value.details["type"] == "dict"
        assert isinstance(exc_info.value.__cause__, TypeError)
    
    def test_nan_rejected(self):
        """Test NaN cannot be stored as JSON."""
        with pytest.raises(SerializationError):
            stringify(float("nan"))


class TestParse:
    """Test parsing stored strings."""
    
    def test_valid_json(self):
        """Test successful parse."""
        error, value = parse('{"a":[1,2]}')
        
        assert error is None
        assert value == {"a": [1, 2]}
    
    def test_invalid_json_returns_raw(self):
        """Test failed parse returns the raw string with an error."""
        error, value = parse("not json")
        
        assert isinstance(error, DeserializationError)
        assert error.raw_value == "not json"
        assert value == "not json"


class TestCompression:
    """Test gzip wire format."""
    
    def test_compress_format(self):
        """Test marker prefix and base64 gzip payload."""
        text = '{"data":"' + "x" * 200 + '"}'
        stored = compress(text)
        
        assert stored.startswith(GZIP_FLAG)
        payload = base64.b64decode(stored[len(GZIP_FLAG):])
        assert gzip.decompress(payload).decode("utf-8") == text
    
    def test_decompress_reverses_compress(self):
        """Test decompress round trip including non-ASCII text."""
        text = '"' + "ünïcode " * 50 + '"'
        
        assert decompress(compress(text)) == text
    
    def test_decompress_garbage(self):
        """Test corrupt payloads raise DeserializationError."""
        with pytest.raises(DeserializationError):
            decompress(f"{GZIP_FLAG}!!!not-base64!!!")
        
        with pytest.raises(DeserializationError):
            decompress(GZIP_FLAG + base64.b64encode(b"plain bytes").decode("ascii"))
    
    def test_is_compressed(self):
        """Test marker detection."""
        assert is_compressed(f"{GZIP_FLAG}abc")
        assert not is_compressed('"_gzip_"')
        assert not is_compressed(None)
    
    def test_maybe_compress_adopts_smaller(self):
        """Test large repetitive values are compressed."""
        text = stringify({"data": "a" * 1000})
        
        adopted, stored = maybe_compress(text)
        
        assert adopted
        assert stored.startswith(GZIP_FLAG)
        assert len(stored) < len(text)
    
    def test_maybe_compress_keeps_small(self):
        """Test small values stay raw."""
        text = stringify({"a": 1})
        
        adopted, stored = maybe_compress(text)
        
        assert not adopted
        assert stored == text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""Unit tests for the value codecs."""
from __future__ import annotations

import threading
from datetime import date

import pytest

from tagcache.adapters.codecs import JsonCodec, PickleCodec
from tagcache.application.cache import CacheFacade
from tagcache.config.settings import CacheSettings
from tagcache.kernel.errors import SerializationError
from tagcache.testing.fakes import CollectingErrorSink, InMemoryStore


class TestPickleCodec:
    def test_preserves_python_types(self) -> None:
        codec = PickleCodec()
        value = {"when": date(2026, 1, 1), "ids": (1, 2), "tags": {"a"}}
        assert codec.decode(codec.encode(value)) == value

    def test_encode_failure(self) -> None:
        with pytest.raises(SerializationError) as info:
            PickleCodec().encode(threading.Lock())
        assert info.value.payload_type == "lock"
        assert info.value.cause is not None

    def test_decode_failure(self) -> None:
        with pytest.raises(SerializationError):
            PickleCodec().decode(b"definitely not pickle")


class TestJsonCodec:
    def test_encodes_utf8_json(self) -> None:
        assert JsonCodec().encode({"a": [1, 2]}) == b'{"a": [1, 2]}'

    def test_non_json_values_raise(self) -> None:
        with pytest.raises(SerializationError) as info:
            JsonCodec().encode({"when": date(2026, 1, 1)})
        assert info.value.payload_type == "dict"

    def test_save_of_non_json_value_reports_and_fails(self) -> None:
        sink = CollectingErrorSink()
        cache = CacheFacade(CacheSettings(), store=InMemoryStore(), codec=JsonCodec(), error_sink=sink)
        assert cache.save("d", {"when": date(2026, 1, 1)}) is False
        assert cache.load("d") is None
        assert isinstance(sink.errors[0], SerializationError)

    def test_decode_failure(self) -> None:
        with pytest.raises(SerializationError) as info:
            JsonCodec().decode(b"{broken")
        assert info.value.code == "serialization_error"

    def test_encode_failure_on_circular_value(self) -> None:
        value: list[object] = []
        value.append(value)
        with pytest.raises(SerializationError):
            JsonCodec().encode(value)

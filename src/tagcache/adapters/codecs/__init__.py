"""Codec adapters – value <-> bytes serialisers."""
from tagcache.adapters.codecs.json_codec import JsonCodec
from tagcache.adapters.codecs.pickle_codec import PickleCodec

__all__ = ["JsonCodec", "PickleCodec"]

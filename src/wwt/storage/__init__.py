"""Storage backends."""

from wwt.storage.base import RecordStore
from wwt.storage.json_store import Store, decode_records, encode_records

__all__ = ["RecordStore", "Store", "decode_records", "encode_records"]

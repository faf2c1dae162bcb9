# ABOUTME: Record package for the library holding type and its wire codec.
# ABOUTME: Exports LibraryRecord and the deterministic JSON encode/decode pair.

from shelfledger.records.codec import decode_record, encode_record
from shelfledger.records.types import LibraryRecord

__all__ = [
    "LibraryRecord",
    "decode_record",
    "encode_record",
]

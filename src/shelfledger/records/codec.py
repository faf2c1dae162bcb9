# ABOUTME: Converts between LibraryRecord and its JSON bytes in the world state.
# ABOUTME: Emits keys in fixed order (ID, Owner, Quantity) so every reader hashes the same bytes.

import json
from typing import Any

from shelfledger.records.types import LibraryRecord

_FIELD_ORDER = ("ID", "Owner", "Quantity")


class RecordEncodeError(ValueError):
    """Raised when a LibraryRecord cannot be represented in the wire format."""


class RecordDecodeError(ValueError):
    """Raised when stored bytes are not a valid LibraryRecord payload."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def record_to_dict(record: LibraryRecord) -> dict[str, Any]:
    """Convert a LibraryRecord to its wire-format dict, keys in emit order.

    Raises:
        RecordEncodeError: If a field has a type the wire format cannot carry.
    """
    if not isinstance(record.id, str):
        raise RecordEncodeError(f"ID must be a string, got {type(record.id).__name__}")
    if not isinstance(record.owner, str):
        raise RecordEncodeError(f"Owner must be a string, got {type(record.owner).__name__}")
    if not _is_int(record.quantity):
        raise RecordEncodeError(
            f"Quantity must be an integer, got {type(record.quantity).__name__}"
        )
    return {"ID": record.id, "Owner": record.owner, "Quantity": record.quantity}


def dict_to_record(payload: Any) -> LibraryRecord:
    """Convert a decoded JSON object back to a LibraryRecord.

    Keys outside ID, Owner and Quantity are ignored.

    Raises:
        RecordDecodeError: If a key is missing or carries the wrong type.
    """
    if not isinstance(payload, dict):
        raise RecordDecodeError(f"Expected a JSON object, got {type(payload).__name__}")

    missing = [name for name in _FIELD_ORDER if name not in payload]
    if missing:
        raise RecordDecodeError(f"Missing field(s): {', '.join(missing)}")

    record_id, owner, quantity = (payload[name] for name in _FIELD_ORDER)
    if not isinstance(record_id, str) or not isinstance(owner, str):
        raise RecordDecodeError("ID and Owner must be strings")
    if not _is_int(quantity):
        raise RecordDecodeError(f"Quantity must be an integer, got {quantity!r}")

    return LibraryRecord(id=record_id, owner=owner, quantity=quantity)


def encode_record(record: LibraryRecord) -> bytes:
    """Serialize a LibraryRecord to compact UTF-8 JSON.

    The output is byte-for-byte deterministic: fixed key order, no whitespace,
    non-ASCII characters written as UTF-8 rather than escaped.

    Args:
        record: The record to serialize.

    Returns:
        The JSON payload to store under record.id.

    Raises:
        RecordEncodeError: If a field cannot be represented.
    """
    payload = record_to_dict(record)
    try:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise RecordEncodeError(f"Record {record.id!r} is not valid UTF-8 text: {exc}") from exc


def decode_record(data: bytes) -> LibraryRecord:
    """Deserialize JSON bytes from the world state into a LibraryRecord.

    Raises:
        RecordDecodeError: On invalid UTF-8, invalid JSON, or a malformed payload.
    """
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise RecordDecodeError(f"Invalid record payload: {exc}") from exc
    return dict_to_record(payload)

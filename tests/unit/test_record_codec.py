# ABOUTME: Unit tests for LibraryRecord to/from JSON wire-format conversion.
# ABOUTME: Validates field order, compact bytes, round-trips, and malformed payload handling.

import json

import pytest

from shelfledger.records.codec import (
    RecordDecodeError,
    RecordEncodeError,
    decode_record,
    dict_to_record,
    encode_record,
    record_to_dict,
)
from shelfledger.records.types import LibraryRecord


class TestEncodeRecord:
    """Tests for encode_record."""

    def test_fields_in_fixed_order(self) -> None:
        """Keys are emitted as ID, Owner, Quantity with no whitespace."""
        data = encode_record(LibraryRecord(id="book7", owner="Ana", quantity=3))
        assert data == b'{"ID":"book7","Owner":"Ana","Quantity":3}'

    def test_non_ascii_written_as_utf8(self) -> None:
        """Non-ASCII owner names are stored as UTF-8, not \\u escapes."""
        data = encode_record(LibraryRecord(id="book8", owner="José", quantity=1))
        assert data == '{"ID":"book8","Owner":"José","Quantity":1}'.encode()

    def test_same_record_same_bytes(self) -> None:
        """Two equal records always encode to identical bytes."""
        a = encode_record(LibraryRecord(id="x", owner="y", quantity=0))
        b = encode_record(LibraryRecord(id="x", owner="y", quantity=0))
        assert a == b

    def test_negative_and_zero_quantity_allowed(self) -> None:
        """Quantity is not range-checked."""
        assert b'"Quantity":-2' in encode_record(LibraryRecord(id="x", owner="y", quantity=-2))
        assert b'"Quantity":0' in encode_record(LibraryRecord(id="x", owner="y", quantity=0))

    def test_float_quantity_rejected(self) -> None:
        """A non-integer quantity cannot be encoded."""
        with pytest.raises(RecordEncodeError, match="Quantity"):
            encode_record(LibraryRecord(id="x", owner="y", quantity=1.5))  # type: ignore[arg-type]

    def test_bool_quantity_rejected(self) -> None:
        """bool is not accepted as an integer quantity."""
        with pytest.raises(RecordEncodeError):
            encode_record(LibraryRecord(id="x", owner="y", quantity=True))

    def test_non_string_owner_rejected(self) -> None:
        """Owner must be a string."""
        with pytest.raises(RecordEncodeError, match="Owner"):
            encode_record(LibraryRecord(id="x", owner=None, quantity=1))  # type: ignore[arg-type]

    def test_encode_error_is_value_error(self) -> None:
        """RecordEncodeError can be caught as ValueError."""
        assert issubclass(RecordEncodeError, ValueError)

    def test_lone_surrogate_rejected(self) -> None:
        """Text that has no UTF-8 form raises RecordEncodeError, not UnicodeEncodeError."""
        with pytest.raises(RecordEncodeError, match="UTF-8"):
            encode_record(LibraryRecord(id="book7", owner="\udcff", quantity=1))


class TestDecodeRecord:
    """Tests for decode_record."""

    def test_decodes_wire_format(self) -> None:
        """Wire-format bytes decode to the matching record."""
        record = decode_record(b'{"ID":"book1","Owner":"Tomoko","Quantity":5}')
        assert record == LibraryRecord(id="book1", owner="Tomoko", quantity=5)

    def test_key_order_does_not_matter(self) -> None:
        """Payloads written by other tools in a different key order still decode."""
        record = decode_record(b'{"Quantity": 5, "Owner": "Tomoko", "ID": "book1"}')
        assert record == LibraryRecord(id="book1", owner="Tomoko", quantity=5)

    def test_extra_keys_ignored(self) -> None:
        """Unknown keys are dropped."""
        record = decode_record(b'{"ID":"a","Owner":"b","Quantity":1,"Color":"blue"}')
        assert record == LibraryRecord(id="a", owner="b", quantity=1)

    def test_invalid_json(self) -> None:
        """Garbage bytes raise RecordDecodeError."""
        with pytest.raises(RecordDecodeError):
            decode_record(b"not json")

    def test_invalid_utf8(self) -> None:
        """Bytes that are not UTF-8 raise RecordDecodeError."""
        with pytest.raises(RecordDecodeError):
            decode_record(b"\xff\xfe")

    def test_non_object_payload(self) -> None:
        """A JSON array is not a record."""
        with pytest.raises(RecordDecodeError, match="object"):
            decode_record(b"[1, 2, 3]")

    def test_missing_field(self) -> None:
        """A payload without Quantity is rejected and names the field."""
        with pytest.raises(RecordDecodeError, match="Quantity"):
            decode_record(b'{"ID":"a","Owner":"b"}')

    def test_string_quantity_rejected(self) -> None:
        """Quantity given as a string is rejected."""
        with pytest.raises(RecordDecodeError):
            decode_record(b'{"ID":"a","Owner":"b","Quantity":"3"}')

    def test_fractional_quantity_rejected(self) -> None:
        """Quantity with a fractional part is rejected."""
        with pytest.raises(RecordDecodeError):
            decode_record(b'{"ID":"a","Owner":"b","Quantity":3.5}')


class TestRoundTrip:
    """Tests for bytes -> record -> bytes stability."""

    @pytest.mark.parametrize(
        "record",
        [
            LibraryRecord(id="book1", owner="Tomoko", quantity=5),
            LibraryRecord(id="book3", owner="Jin Soo", quantity=10),
            LibraryRecord(id="b\"q", owner="O'Neil \\ Åsa", quantity=-1),
        ],
    )
    def test_encode_decode_encode_is_stable(self, record: LibraryRecord) -> None:
        """Re-encoding decoded bytes reproduces them exactly."""
        data = encode_record(record)
        assert encode_record(decode_record(data)) == data
        assert decode_record(data) == record


class TestDictMapping:
    """Tests for record_to_dict and dict_to_record."""

    def test_record_to_dict_key_order(self) -> None:
        """Dict keys come out in wire order."""
        payload = record_to_dict(LibraryRecord(id="a", owner="b", quantity=1))
        assert list(payload) == ["ID", "Owner", "Quantity"]

    def test_dict_round_trip_through_json(self) -> None:
        """A dict dumped by json with sort_keys produces the same bytes as encode_record."""
        record = LibraryRecord(id="a", owner="b", quantity=1)
        dumped = json.dumps(record_to_dict(record), sort_keys=True, separators=(",", ":"))
        assert dumped.encode() == encode_record(record)
        assert dict_to_record(json.loads(dumped)) == record

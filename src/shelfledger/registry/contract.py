# ABOUTME: LibraryRegistry, the record-lifecycle operations applied to the host world state.
# ABOUTME: Bootstrap, exists, create, read, update, delete, transfer, and full-range listing.

import logging
from collections.abc import Generator

from shelfledger.records.codec import (
    RecordDecodeError,
    RecordEncodeError,
    decode_record,
    encode_record,
)
from shelfledger.records.types import LibraryRecord
from shelfledger.registry.errors import (
    AlreadyExistsError,
    DeserializationError,
    NotFoundError,
    SerializationError,
    StoreReadError,
    StoreScanError,
    StoreWriteError,
)
from shelfledger.registry.seed import SEED_RECORDS
from shelfledger.state.context import TransactionContext
from shelfledger.state.protocol import WorldStateError

logger = logging.getLogger(__name__)


class LibraryRegistry:
    """Typed record operations over whatever world state the host supplies.

    The registry holds no state: every call reads or writes through
    ctx.state immediately. Operations that check existence and then write
    (create, update, delete) and transfer's read-then-write are not atomic
    here; isolation between concurrent callers is the host transaction's job.
    """

    # --- Helpers ---

    def _get(self, ctx: TransactionContext, operation: str, record_id: str) -> bytes | None:
        try:
            return ctx.state.get(record_id)
        except WorldStateError as exc:
            logger.warning("tx %s: %s %s read failed: %s", ctx.tx_id, operation, record_id, exc)
            raise StoreReadError(operation, record_id, str(exc)) from exc

    def _put(self, ctx: TransactionContext, operation: str, record: LibraryRecord) -> None:
        try:
            data = encode_record(record)
        except RecordEncodeError as exc:
            raise SerializationError(operation, record.id, str(exc)) from exc
        try:
            ctx.state.put(record.id, data)
        except WorldStateError as exc:
            logger.warning("tx %s: %s %s write failed: %s", ctx.tx_id, operation, record.id, exc)
            raise StoreWriteError(operation, record.id, str(exc)) from exc

    def _decode(self, operation: str, key: str, data: bytes) -> LibraryRecord:
        try:
            record = decode_record(data)
        except RecordDecodeError as exc:
            raise DeserializationError(operation, key, str(exc)) from exc
        if record.id != key:
            raise DeserializationError(
                operation, key, f"stored ID {record.id!r} does not match key {key!r}"
            )
        return record

    def _require(self, ctx: TransactionContext, operation: str, record_id: str) -> None:
        if not self._exists(ctx, operation, record_id):
            raise NotFoundError(operation, record_id, "record does not exist")

    def _exists(self, ctx: TransactionContext, operation: str, record_id: str) -> bool:
        return self._get(ctx, operation, record_id) is not None

    def _load(self, ctx: TransactionContext, operation: str, record_id: str) -> LibraryRecord:
        data = self._get(ctx, operation, record_id)
        if data is None:
            raise NotFoundError(operation, record_id, "record does not exist")
        return self._decode(operation, record_id, data)

    # --- Operations ---

    def bootstrap(self, ctx: TransactionContext) -> None:
        """Write the seed records, overwriting any already stored under the same ids.

        Raises:
            SerializationError: If a seed record cannot be encoded.
            StoreWriteError: If the world state rejects a write.
        """
        for record in SEED_RECORDS:
            self._put(ctx, "bootstrap", record)
        logger.info("tx %s: bootstrapped %d records", ctx.tx_id, len(SEED_RECORDS))

    def exists(self, ctx: TransactionContext, record_id: str) -> bool:
        """Return whether a record is stored under record_id.

        Absence is a normal False result, never NotFoundError.

        Raises:
            StoreReadError: If the world state read fails.
        """
        return self._exists(ctx, "exists", record_id)

    def create(self, ctx: TransactionContext, record_id: str, quantity: int, owner: str) -> None:
        """Store a new record.

        Raises:
            AlreadyExistsError: If record_id is already stored. The store is not touched.
            SerializationError: If the record cannot be encoded.
            StoreReadError: If the existence check fails.
            StoreWriteError: If the write fails.
        """
        if self._exists(ctx, "create", record_id):
            raise AlreadyExistsError("create", record_id, "record already exists")

        self._put(ctx, "create", LibraryRecord(id=record_id, owner=owner, quantity=quantity))
        logger.info(
            "tx %s: created %s (owner=%s, quantity=%s)", ctx.tx_id, record_id, owner, quantity
        )

    def read(self, ctx: TransactionContext, record_id: str) -> LibraryRecord:
        """Fetch the record stored under record_id.

        Raises:
            NotFoundError: If nothing is stored under record_id.
            StoreReadError: If the world state read fails.
            DeserializationError: If the stored bytes are not a valid record.
        """
        return self._load(ctx, "read", record_id)

    def update(self, ctx: TransactionContext, record_id: str, quantity: int, owner: str) -> None:
        """Replace the full record stored under record_id. Nothing is merged.

        Raises:
            NotFoundError: If nothing is stored under record_id.
            SerializationError: If the record cannot be encoded.
            StoreReadError: If the existence check fails.
            StoreWriteError: If the write fails.
        """
        self._require(ctx, "update", record_id)
        self._put(ctx, "update", LibraryRecord(id=record_id, owner=owner, quantity=quantity))
        logger.info(
            "tx %s: updated %s (owner=%s, quantity=%s)", ctx.tx_id, record_id, owner, quantity
        )

    def delete(self, ctx: TransactionContext, record_id: str) -> None:
        """Remove the record stored under record_id.

        Raises:
            NotFoundError: If nothing is stored under record_id.
            StoreReadError: If the existence check fails.
            StoreWriteError: If the delete fails.
        """
        self._require(ctx, "delete", record_id)
        try:
            ctx.state.delete(record_id)
        except WorldStateError as exc:
            logger.warning("tx %s: delete %s failed: %s", ctx.tx_id, record_id, exc)
            raise StoreWriteError("delete", record_id, str(exc)) from exc
        logger.info("tx %s: deleted %s", ctx.tx_id, record_id)

    def transfer(self, ctx: TransactionContext, record_id: str, new_owner: str) -> str:
        """Hand a record to new_owner and return the owner it had before.

        If the write fails the error propagates and no owner is returned.
        The earlier read is not undone; rolling back is left to the host
        transaction.

        Raises:
            NotFoundError: If nothing is stored under record_id.
            StoreReadError: If the world state read fails.
            DeserializationError: If the stored bytes are not a valid record.
            StoreWriteError: If the rewrite fails.
        """
        current = self._load(ctx, "transfer", record_id)
        old_owner = current.owner
        updated = LibraryRecord(id=record_id, owner=new_owner, quantity=current.quantity)
        self._put(ctx, "transfer", updated)
        logger.info(
            "tx %s: transferred %s from %s to %s", ctx.tx_id, record_id, old_owner, new_owner
        )
        return old_owner

    def iter_records(self, ctx: TransactionContext) -> Generator[LibraryRecord, None, None]:
        """Lazily yield every stored record in world-state iteration order.

        The underlying scan is closed however iteration ends: exhaustion,
        an error, or the caller closing this generator early.

        Raises:
            StoreScanError: If the scan fails to start or fails on any entry.
            DeserializationError: If any stored value is not a valid record.
        """
        try:
            entries = ctx.state.scan("", "")
        except WorldStateError as exc:
            raise StoreScanError("list", None, str(exc)) from exc

        try:
            while True:
                try:
                    key, value = next(entries)
                except StopIteration:
                    return
                except WorldStateError as exc:
                    logger.warning("tx %s: scan failed: %s", ctx.tx_id, exc)
                    raise StoreScanError("list", None, str(exc)) from exc
                yield self._decode("list", key, value)
        finally:
            close = getattr(entries, "close", None)
            if close is not None:
                close()

    def list_records(self, ctx: TransactionContext) -> list[LibraryRecord]:
        """Return every stored record. On any failure nothing is returned."""
        return list(self.iter_records(ctx))

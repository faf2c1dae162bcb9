# ABOUTME: The fixed set of records written by LibraryRegistry.bootstrap.
# ABOUTME: Six holdings, book1 through book6.

from shelfledger.records.types import LibraryRecord

SEED_RECORDS: tuple[LibraryRecord, ...] = (
    LibraryRecord(id="book1", owner="Tomoko", quantity=5),
    LibraryRecord(id="book2", owner="Brad", quantity=5),
    LibraryRecord(id="book3", owner="Jin Soo", quantity=10),
    LibraryRecord(id="book4", owner="Max", quantity=10),
    LibraryRecord(id="book5", owner="Adriana", quantity=15),
    LibraryRecord(id="book6", owner="Michel", quantity=15),
)

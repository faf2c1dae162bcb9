# ABOUTME: Core record data structure for a library holding in the world state.
# ABOUTME: LibraryRecord is the value stored under its own id as the state key.

from dataclasses import dataclass


@dataclass
class LibraryRecord:
    """A holding of copies of one title, owned by a single party.

    The id doubles as the world-state key and never changes once the record
    exists. Owner and quantity are replaced wholesale on update and transfer.
    """

    id: str
    owner: str
    quantity: int

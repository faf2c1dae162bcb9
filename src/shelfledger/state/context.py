# ABOUTME: TransactionContext, the explicit per-call handle given to every registry operation.
# ABOUTME: Carries the host-supplied world state and a transaction id for log correlation.

import uuid
from dataclasses import dataclass, field

from shelfledger.state.protocol import WorldState


def _new_tx_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class TransactionContext:
    """The host's view of one transaction.

    The registry reads and writes only through state, and never keeps a
    reference to the context past the call it was passed to.
    """

    state: WorldState
    tx_id: str = field(default_factory=_new_tx_id)

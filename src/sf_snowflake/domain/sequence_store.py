# src/sf_snowflake/domain/sequence_store.py
"""SequenceStore Protocol — dependency inversion for testability.

Unit tests inject a mock or the in-memory store; production uses Redis.

Contract for next_sequence(machine_id, timestamp):
  - atomic create-if-absent + increment on key "<timestamp>_<machine_id>"
  - first call for a key returns 0, later calls strictly greater values
  - the key expires on its own; it is never deleted explicitly
  - raises StoreUnavailableError when the store cannot be reached in time
"""

from typing import Protocol


def sequence_key(machine_id: int, timestamp: int) -> str:
    return f"{timestamp}_{machine_id}"


class SequenceStoreProtocol(Protocol):
    async def next_sequence(self, machine_id: int, timestamp: int) -> int: ...

"""Snowflake bit layout (64 bits, unsigned):

  - 42 bits: millisecond timestamp (since configured epoch)
  - 10 bits: machine_id (0-1023)
  - 12 bits: sequence (0-4095 per millisecond)

The top bit doubles as the sign bit of a signed 64-bit reading and stays
clear while the timestamp is below 2**41.
"""

from src.sf_common.errors import ConfigError, InvalidSnowflakeError
from src.sf_snowflake.domain.models import SnowflakeParts

TIMESTAMP_BITS = 42
MACHINE_BITS = 10
SEQUENCE_BITS = 12

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_MACHINE_ID = (1 << MACHINE_BITS) - 1
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1

MACHINE_SHIFT = SEQUENCE_BITS
TIMESTAMP_SHIFT = MACHINE_BITS + SEQUENCE_BITS

_MAX_ID = (1 << 64) - 1


def validate_machine_id(machine_id: int) -> int:
    if not (0 <= machine_id <= MAX_MACHINE_ID):
        raise ConfigError(f"machine_id must be 0-{MAX_MACHINE_ID}, got {machine_id}")
    return machine_id


def encode(timestamp: int, machine_id: int, sequence: int) -> int:
    """Pack the fields into one id. Each field is masked to its width first."""
    return (
        ((timestamp & MAX_TIMESTAMP) << TIMESTAMP_SHIFT)
        | ((machine_id & MAX_MACHINE_ID) << MACHINE_SHIFT)
        | (sequence & MAX_SEQUENCE)
    )


def decode(snowflake_id: int) -> SnowflakeParts:
    if not (0 <= snowflake_id <= _MAX_ID):
        raise InvalidSnowflakeError(snowflake_id)
    return SnowflakeParts(
        timestamp=snowflake_id >> TIMESTAMP_SHIFT,
        machine_id=(snowflake_id >> MACHINE_SHIFT) & MAX_MACHINE_ID,
        sequence=snowflake_id & MAX_SEQUENCE,
    )

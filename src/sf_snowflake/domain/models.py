"""Domain models for sf_snowflake — pure dataclasses, no business logic."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SnowflakeParts:
    """The three fields packed into one snowflake id."""

    timestamp: int   # ms since the configured epoch
    machine_id: int
    sequence: int

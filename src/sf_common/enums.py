"""Global enums — values match the accepted environment variable spellings."""

from enum import Enum


class EpochMode(str, Enum):
    """Which wall clock the timestamp field is measured on."""
    UTC = "UTC"
    LOCAL = "Local"


class SequenceBackend(str, Enum):
    REDIS = "redis"
    MEMORY = "memory"

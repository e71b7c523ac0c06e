"""Pydantic schemas for sf_snowflake API responses.

Ids are serialized as decimal strings: 64-bit values exceed the 53-bit
integer precision of JSON consumers such as JavaScript.
"""

from datetime import datetime

from pydantic import BaseModel

from src.sf_common.datetime_utils import from_epoch_ms
from src.sf_common.enums import EpochMode
from src.sf_snowflake.domain.models import SnowflakeParts


class SnowflakeOut(BaseModel):
    id: str
    machine_id: int


class SnowflakeDetail(BaseModel):
    id: str
    timestamp: int
    machine_id: int
    sequence: int
    # LOCAL mode ids carry local wall-clock time, returned without tzinfo
    generated_at: datetime

    @classmethod
    def from_parts(
        cls, snowflake_id: int, parts: SnowflakeParts, mode: EpochMode, epoch_ms: int
    ) -> "SnowflakeDetail":
        generated_at = from_epoch_ms(parts.timestamp, epoch_ms)
        if mode is EpochMode.LOCAL:
            generated_at = generated_at.replace(tzinfo=None)
        return cls(
            id=str(snowflake_id),
            timestamp=parts.timestamp,
            machine_id=parts.machine_id,
            sequence=parts.sequence,
            generated_at=generated_at,
        )

"""UTC datetime utilities."""

from datetime import datetime, timezone


def from_epoch_ms(millis: int, epoch_ms: int = 0) -> datetime:
    """Convert milliseconds since ``epoch_ms`` (itself Unix ms) to an aware UTC datetime."""
    return datetime.fromtimestamp((millis + epoch_ms) / 1000, tz=timezone.utc)

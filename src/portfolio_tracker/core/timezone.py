"""Timezone utilities for US/Eastern market time."""

from datetime import datetime

import pytz

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern timezone."""
    if dt.tzinfo is None:
        # Assume naive datetime is already Eastern
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def to_epoch_millis(dt: datetime) -> int:
    """Convert a datetime to a Unix timestamp in milliseconds."""
    return int(to_eastern(dt).timestamp() * 1000)

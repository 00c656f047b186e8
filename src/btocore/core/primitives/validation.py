"""
Reusable input checks shared by the project ledgers.

This module provides standardized helpers for:
- Instant normalization (dates, strings and timestamps to pd.Timestamp)
- Count sanitizing (negative counts clamped to zero)
- Window ordering checks (open date after close date)
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Union

import pandas as pd

logger = logging.getLogger(__name__)

InstantLike = Union[pd.Timestamp, datetime, date, str]


def normalize_instant(value: InstantLike) -> pd.Timestamp:
    """
    Convert any supported instant representation into a naive pd.Timestamp.

    Timezone-aware values are converted to UTC and the zone is dropped, so
    every instant the ledgers compare is naive UTC.

    Args:
        value: Timestamp, datetime, date or ISO-8601 string

    Returns:
        Equivalent pd.Timestamp

    Raises:
        ValueError: If the value cannot be interpreted as an instant
    """
    if isinstance(value, pd.Timestamp):
        result = value
    else:
        try:
            result = pd.Timestamp(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot interpret {value!r} as an instant") from e
    if pd.isna(result):
        raise ValueError(f"Cannot interpret {value!r} as an instant")
    if result.tzinfo is not None:
        result = result.tz_convert(None)
    return result


def utc_now() -> pd.Timestamp:
    """Current time as a naive UTC timestamp."""
    return pd.Timestamp.now(tz="UTC").tz_convert(None)


def clamp_non_negative(count: int, label: str) -> int:
    """
    Floor a unit or slot count at zero.

    Negative counts are a caller bug; they are clamped and logged rather
    than raised so the ledger stays in a valid state.
    """
    if count < 0:
        logger.warning(f"Negative count {count} for {label}; clamping to 0")
        return 0
    return count


def is_inverted_window(open_date: pd.Timestamp, close_date: pd.Timestamp) -> bool:
    """Check whether a window closes before it opens."""
    return close_date < open_date

"""
Expiration - Timestamp scale detection and formatting

Module: core.expiration
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - Second/millisecond scale detection
  - Expiration check against wall-clock time
  - Display formatting with millisecond annotation

ARCHITECTURE:
Stored expirations are integer epochs. Legacy entries were written in
milliseconds, so any value above the largest 10-digit epoch is read as
milliseconds. is_expired() and format_date() share to_seconds() so they
can never disagree about the scale.
"""

import time
from datetime import datetime
from typing import Optional

from .constants import (
    DATE_FORMAT,
    INVALID_DATE,
    MILLISECOND_SUFFIX,
    MILLISECOND_THRESHOLD,
    MILLISECONDS_PER_SECOND,
    SECONDS_PER_DAY,
)


def current_time() -> int:
    """Current epoch time in whole seconds"""
    return int(time.time())


def is_milliseconds(timestamp: int) -> bool:
    """True when the timestamp is too large to be an epoch in seconds"""
    return timestamp > MILLISECOND_THRESHOLD


def to_seconds(timestamp: int) -> int:
    """
    Normalize a stored timestamp to epoch seconds

    Args:
        timestamp: Epoch value in seconds or milliseconds

    Returns:
        Epoch value in seconds
    """
    if is_milliseconds(timestamp):
        return timestamp // MILLISECONDS_PER_SECOND
    return timestamp


def is_expired(expire: int, now: Optional[int] = None) -> bool:
    """
    Check whether an expiration lies in the past

    A token expiring exactly at `now` is still active.

    Args:
        expire: Stored expiration (seconds or milliseconds)
        now: Reference epoch seconds (defaults to current time)

    Returns:
        True if expired
    """
    if now is None:
        now = current_time()
    return to_seconds(expire) < now


def format_date(timestamp: int) -> str:
    """
    Format a stored timestamp as local date and time

    Args:
        timestamp: Epoch value in seconds or milliseconds

    Returns:
        "YYYY-MM-DD HH:MM:SS", suffixed when read as milliseconds
    """
    try:
        formatted = datetime.fromtimestamp(to_seconds(timestamp)).strftime(DATE_FORMAT)
    except (OverflowError, OSError, ValueError):
        return INVALID_DATE

    if is_milliseconds(timestamp):
        return formatted + MILLISECOND_SUFFIX
    return formatted


def days_from_now(days: int, now: Optional[int] = None) -> int:
    """Epoch seconds `days` whole days after `now`"""
    if now is None:
        now = current_time()
    return now + days * SECONDS_PER_DAY

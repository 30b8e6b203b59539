"""
Core module - Token model and time rules

Provides:
- TokenTable / TokenRecord: In-memory token registry
- Expiration helpers: scale detection, is_expired, format_date
- generate_token: Opaque token identifiers
"""

from .expiration import current_time, format_date, is_expired, to_seconds
from .token_generator import generate_token
from .token_table import (
    DuplicateTokenError,
    InvalidClientNameError,
    InvalidDaysError,
    TokenNotFoundError,
    TokenRecord,
    TokenStatistics,
    TokenTable,
    TokenTableError,
)

__all__ = [
    "current_time",
    "format_date",
    "is_expired",
    "to_seconds",
    "generate_token",
    "DuplicateTokenError",
    "InvalidClientNameError",
    "InvalidDaysError",
    "TokenNotFoundError",
    "TokenRecord",
    "TokenStatistics",
    "TokenTable",
    "TokenTableError",
]

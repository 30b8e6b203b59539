"""
Token Table - In-memory working copy of the token registry

Module: core.token_table
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - TokenRecord schema with field-level defaults
  - TokenTable CRUD operations with validation
  - Expired token selection and bulk removal
  - Active/expired statistics

ARCHITECTURE:
TokenTable is the short-lived working copy loaded at the top of each
menu iteration. It owns the validation rules (unique tokens, non-empty
client names, integer expirations) and raises TokenTableError
subclasses; callers decide how to report them.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    FIELD_EXPIRE,
    FIELD_NAME_CLIENT,
    REDACTION_MARKER,
    SECONDS_PER_DAY,
    TOKEN_PREFIX_CHARS,
    TOKEN_SHORT_PREFIX_CHARS,
    TOKEN_SHORT_SUFFIX_CHARS,
    TOKEN_SUFFIX_CHARS,
    UNKNOWN_CLIENT,
)
from .expiration import current_time, is_expired

DAY_OFFSET_PATTERN = re.compile(r"[+-]?[0-9]+")


class TokenTableError(Exception):
    """Base token table error"""
    pass


class DuplicateTokenError(TokenTableError):
    """Token already present in the table"""
    pass


class TokenNotFoundError(TokenTableError):
    """Token not present in the table"""
    pass


class InvalidClientNameError(TokenTableError):
    """Client name is empty"""
    pass


class InvalidDaysError(TokenTableError):
    """Day count typed by the operator is not a valid integer"""
    pass


def redact_token(token: str) -> str:
    """
    Shorten a token for display and logs

    At most half of the token is ever shown: long tokens keep a wide
    prefix and suffix, medium ones a narrow prefix and suffix, short ones
    only a narrow prefix.
    """
    if len(token) >= 2 * (TOKEN_PREFIX_CHARS + TOKEN_SUFFIX_CHARS):
        return f"{token[:TOKEN_PREFIX_CHARS]}{REDACTION_MARKER}{token[-TOKEN_SUFFIX_CHARS:]}"
    if len(token) >= 2 * (TOKEN_SHORT_PREFIX_CHARS + TOKEN_SHORT_SUFFIX_CHARS):
        return (
            f"{token[:TOKEN_SHORT_PREFIX_CHARS]}{REDACTION_MARKER}"
            f"{token[-TOKEN_SHORT_SUFFIX_CHARS:]}"
        )
    return f"{token[:TOKEN_SHORT_PREFIX_CHARS]}{REDACTION_MARKER}"


def parse_days(text: str) -> int:
    """
    Parse a day count typed by the operator

    Args:
        text: Raw input

    Returns:
        Non-negative number of days

    Raises:
        InvalidDaysError: Input is not made of digits only
    """
    value = text.strip()
    if not value or not (value.isascii() and value.isdigit()):
        raise InvalidDaysError(f"Invalid number of days: {text!r}")
    return int(value)


def parse_day_offset(text: str) -> int:
    """
    Parse a signed day offset typed by the operator

    Negative offsets move an expiration back in time.

    Raises:
        InvalidDaysError: Input is not an optionally signed integer
    """
    value = text.strip()
    if not DAY_OFFSET_PATTERN.fullmatch(value):
        raise InvalidDaysError(f"Invalid number of days: {text!r}")
    return int(value)


class TokenRecord(BaseModel):
    """
    Stored token record

    Serialized as {"expire": int, "nameClient": str}.
    """

    model_config = ConfigDict(populate_by_name=True)

    expire: int = Field(default=0, alias=FIELD_EXPIRE)
    name_client: str = Field(default=UNKNOWN_CLIENT, alias=FIELD_NAME_CLIENT)

    @field_validator("expire", mode="before")
    @classmethod
    def _default_expire(cls, value: Any) -> Any:
        # Missing or null expirations count as long expired
        if value is None:
            return 0
        if isinstance(value, bool):
            raise ValueError("expire must be an integer, not a boolean")
        return value

    @field_validator("name_client", mode="before")
    @classmethod
    def _default_name_client(cls, value: Any) -> Any:
        if value is None:
            return UNKNOWN_CLIENT
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str) and not value.strip():
            return UNKNOWN_CLIENT
        return value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON storage"""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenRecord":
        """Create from dictionary (from JSON)"""
        return cls.model_validate(data)


@dataclass(frozen=True)
class TokenStatistics:
    """Token counts by status"""

    total: int
    active: int
    expired: int


class TokenTable:
    """
    Ordered mapping of token string to TokenRecord.

    Iteration follows insertion order, which is the file order for a
    freshly loaded table.

    Raw entries that failed validation on load are kept aside untouched:
    they are not listed, counted or editable, but they block reuse of
    their token and are written back as they were.
    """

    def __init__(
        self,
        records: Optional[Dict[str, TokenRecord]] = None,
        passthrough: Optional[Dict[str, Any]] = None,
    ):
        self.logger = logging.getLogger("core.TokenTable")
        self._records: Dict[str, TokenRecord] = dict(records or {})
        self._passthrough: Dict[str, Any] = dict(passthrough or {})

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, token: object) -> bool:
        return token in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenTable):
            return NotImplemented
        return (
            self._records == other._records
            and self._passthrough == other._passthrough
        )

    def __repr__(self) -> str:
        return f"TokenTable({len(self)} tokens)"

    @property
    def passthrough(self) -> Dict[str, Any]:
        """Raw entries kept aside on load, by token"""
        return dict(self._passthrough)

    def is_taken(self, token: str) -> bool:
        """True if the token is used by a record or a kept-aside entry"""
        return token in self._records or token in self._passthrough

    def is_empty(self) -> bool:
        return not self._records

    def items(self) -> List[Tuple[str, TokenRecord]]:
        return list(self._records.items())

    def get(self, token: str) -> TokenRecord:
        """
        Look up a record by its full token

        Raises:
            TokenNotFoundError: Token not present
        """
        try:
            return self._records[token]
        except KeyError:
            raise TokenNotFoundError(f"Token not found: {redact_token(token)}") from None

    def add(self, token: str, name_client: str, expire: int) -> TokenRecord:
        """
        Insert a new record

        Args:
            token: Full token string (must not be present)
            name_client: Owning client (non-empty)
            expire: Expiration epoch

        Returns:
            The stored TokenRecord

        Raises:
            DuplicateTokenError: Token already present
            InvalidClientNameError: Client name empty
        """
        if self.is_taken(token):
            raise DuplicateTokenError(f"Token already exists: {redact_token(token)}")
        if not name_client or not name_client.strip():
            raise InvalidClientNameError("Client name is required")

        record = TokenRecord(expire=int(expire), name_client=name_client)
        self._records[token] = record
        self.logger.info(f"Token added: {redact_token(token)} for {name_client}")
        return record

    def remove(self, token: str) -> TokenRecord:
        """
        Delete a record

        Raises:
            TokenNotFoundError: Token not present
        """
        record = self.get(token)
        del self._records[token]
        self.logger.info(f"Token removed: {redact_token(token)}")
        return record

    def remove_many(self, tokens: Iterable[str]) -> int:
        """
        Delete every listed token that is present

        Returns:
            Number of records removed
        """
        removed = 0
        for token in list(tokens):
            if self._records.pop(token, None) is not None:
                removed += 1
        self.logger.info(f"Removed {removed} tokens")
        return removed

    def rename(self, token: str, name_client: str) -> TokenRecord:
        """
        Change the client name of a record

        Raises:
            TokenNotFoundError: Token not present
            InvalidClientNameError: New name empty
        """
        record = self.get(token)
        if not name_client or not name_client.strip():
            raise InvalidClientNameError("Client name is required")
        record.name_client = name_client
        self.logger.info(f"Token renamed: {redact_token(token)} -> {name_client}")
        return record

    def extend(self, token: str, days: int) -> TokenRecord:
        """Push the expiration of a record `days` days further"""
        record = self.get(token)
        record.expire = record.expire + days * SECONDS_PER_DAY
        self.logger.info(f"Token extended: {redact_token(token)} by {days} days")
        return record

    def set_expiration(self, token: str, expire: int) -> TokenRecord:
        """Replace the expiration of a record"""
        record = self.get(token)
        record.expire = int(expire)
        self.logger.info(f"Token expiration set: {redact_token(token)} -> {expire}")
        return record

    def expired(self, now: Optional[int] = None) -> Dict[str, TokenRecord]:
        """
        Select every expired record

        Args:
            now: Reference epoch seconds (defaults to current time)

        Returns:
            Ordered mapping of expired tokens
        """
        if now is None:
            now = current_time()
        return {
            token: record
            for token, record in self._records.items()
            if is_expired(record.expire, now)
        }

    def statistics(self, now: Optional[int] = None) -> TokenStatistics:
        """Count total, active and expired records"""
        expired = len(self.expired(now))
        total = len(self._records)
        return TokenStatistics(total=total, active=total - expired, expired=expired)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON document structure, kept-aside entries last"""
        data: Dict[str, Any] = {
            token: record.to_dict() for token, record in self._records.items()
        }
        data.update(self._passthrough)
        return data

"""
Token Store - Token table persistence

Module: persistence.token_store
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - Token table stored in database/tokens.lotus
  - Per-record schema validation on load
  - Rejected records preserved on save
  - Graceful degradation on unreadable files
  - Save with success/failure result

ARCHITECTURE:
TokenStore provides:
  - load(): file -> TokenTable, never raises
  - save(): TokenTable -> file, returns True/False
  - Operator-facing error reporting through the Console

The file on disk is the single source of truth. The menu loop reloads
it every iteration and the table returned here is a disposable copy.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import ValidationError

from ..cli.console import Console
from ..core.constants import DEFAULT_TOKENS_FILE
from ..core.token_table import TokenRecord, TokenTable, redact_token
from .json_store import JSONStore, JSONStoreError


class TokenStore:
    """
    Loads and saves the token table.

    Errors never propagate: parse failures yield an empty table and
    write failures yield False, both reported to the operator.
    """

    def __init__(
        self,
        file_path: Union[str, Path] = DEFAULT_TOKENS_FILE,
        console: Optional[Console] = None,
    ):
        """
        Initialize token store

        Args:
            file_path: Path of the tokens file
            console: Console used to report errors
        """
        self.logger = logging.getLogger("persistence.TokenStore")
        self.file_path = Path(file_path)
        self.console = console or Console()
        self.store = JSONStore(self.file_path)

    def load(self) -> TokenTable:
        """
        Load the token table

        Returns:
            TokenTable, empty when the file is missing or unreadable
        """
        try:
            data = self.store.load()
        except JSONStoreError as e:
            self.logger.warning(f"Token file unreadable: {e}")
            self.console.error(f"Error reading tokens: {e}")
            return TokenTable()

        records, passthrough = self._parse_records(data)
        return TokenTable(records, passthrough)

    def save(self, table: TokenTable) -> bool:
        """
        Save the token table

        Args:
            table: Table to persist

        Returns:
            True on success, False if the write failed
        """
        try:
            self.store.save(table.to_dict())
        except JSONStoreError as e:
            self.logger.error(f"Token file write failed: {e}")
            self.console.error(f"Error saving file: {e}")
            return False

        self.logger.info(f"Saved {len(table)} tokens to {self.file_path}")
        return True

    def _parse_records(
        self, data: Dict[str, Any]
    ) -> Tuple[Dict[str, TokenRecord], Dict[str, Any]]:
        """
        Validate raw entries one by one

        Entries that are not objects or whose expiration is not an
        integer are kept aside as raw values so a later save writes them
        back unchanged; missing fields fall back to defaults.

        Returns:
            (valid records, rejected raw entries)
        """
        records: Dict[str, TokenRecord] = {}
        passthrough: Dict[str, Any] = {}
        for token, entry in data.items():
            if not isinstance(entry, dict):
                passthrough[token] = entry
                self._skip(token, f"expected an object, got {type(entry).__name__}")
                continue
            try:
                records[token] = TokenRecord.from_dict(entry)
            except ValidationError as e:
                passthrough[token] = entry
                self._skip(token, f"{e.error_count()} invalid field(s)")
        return records, passthrough

    def _skip(self, token: str, reason: str) -> None:
        self.logger.warning(f"Skipping malformed record {redact_token(token)}: {reason}")
        self.console.warning(f"Ignoring malformed token {redact_token(token)}: {reason}")

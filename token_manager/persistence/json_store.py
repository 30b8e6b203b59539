"""
JSON Store - Base class for JSON file handling

Module: persistence.json_store
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - Load with empty object for a missing file
  - Pretty-printed output with unescaped slashes and trailing newline
  - Automatic directory creation
  - Atomic writes

ARCHITECTURE:
JSONStore provides:
  - JSON serialization/deserialization of a single top-level object
  - Atomic writes (write to temp file, then rename)
  - Typed errors for unreadable, malformed and unwritable files
"""

import contextlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..core.constants import STORE_DIR_MODE, STORE_ENCODING, STORE_INDENT


class JSONStoreError(Exception):
    """Base JSON store error"""
    pass


class JSONStoreIOError(JSONStoreError):
    """File I/O error"""
    pass


class JSONStoreFormatError(JSONStoreError):
    """JSON format error"""
    pass


class JSONStore:
    """
    Base class for JSON-based persistence.

    Handles:
    - Missing files (empty object, nothing written)
    - Atomic writes (temp file + rename)
    - Automatic directory creation on save
    """

    def __init__(self, file_path: Union[str, Path]):
        """
        Initialize JSON store

        Args:
            file_path: Path to JSON file
        """
        self.logger = logging.getLogger(f"persistence.{self.__class__.__name__}")
        self.file_path = Path(file_path)

    def load(self) -> Dict[str, Any]:
        """
        Load data from JSON file

        Returns:
            Parsed JSON object, or an empty one when the file doesn't exist

        Raises:
            JSONStoreIOError: If file cannot be read
            JSONStoreFormatError: If content is not a JSON object
        """
        try:
            with open(self.file_path, "r", encoding=STORE_ENCODING) as f:
                data = json.load(f)
        except FileNotFoundError:
            self.logger.debug(f"File not found, starting empty: {self.file_path}")
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise JSONStoreFormatError(f"Invalid JSON in {self.file_path}: {e}") from e
        except OSError as e:
            raise JSONStoreIOError(f"Failed to read {self.file_path}: {e}") from e

        if not isinstance(data, dict):
            raise JSONStoreFormatError(
                f"Invalid JSON in {self.file_path}: expected an object, "
                f"got {type(data).__name__}"
            )
        return data

    def save(self, data: Dict[str, Any]) -> None:
        """
        Save data to JSON file (atomic write)

        Args:
            data: Data to save

        Raises:
            JSONStoreIOError: If write fails
        """
        self._write_atomic(data)

    @staticmethod
    def dumps(data: Dict[str, Any]) -> str:
        """
        Serialize data in the on-disk format

        Indented, non-ASCII kept as is, slashes unescaped (json never
        escapes them), newline-terminated.
        """
        return json.dumps(data, indent=STORE_INDENT, ensure_ascii=False) + "\n"

    def _write_atomic(self, data: Dict[str, Any]) -> None:
        """
        Atomic write: write to temp file, then rename

        Args:
            data: Data to write

        Raises:
            JSONStoreIOError: If write fails
        """
        try:
            content = self.dumps(data)
        except (TypeError, ValueError) as e:
            raise JSONStoreIOError(f"Failed to serialize data for {self.file_path}: {e}") from e

        temp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        try:
            self.file_path.parent.mkdir(mode=STORE_DIR_MODE, parents=True, exist_ok=True)

            with open(temp_path, "w", encoding=STORE_ENCODING) as f:
                f.write(content)

            # Atomic rename
            temp_path.replace(self.file_path)

        except OSError as e:
            with contextlib.suppress(OSError):
                temp_path.unlink()
            raise JSONStoreIOError(f"Failed to write {self.file_path}: {e}") from e

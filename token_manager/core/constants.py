"""
Constants for Token Manager

Module: core.constants
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial constants definition
  - Storage location
  - Expiration arithmetic and timestamp scale detection
  - Token display and generation settings
  - Menu choices and confirmation answers
  - Terminal colors and glyphs

NOTES:
- The tool reads no environment variables and takes no flags,
  every tunable lives here
"""

from pathlib import Path
from typing import Final, FrozenSet

# ============================================================================
# Application Identity
# ============================================================================

APP_NAME: Final[str] = "Token Manager"
APP_TITLE: Final[str] = f"{APP_NAME} - LIPC"

# ============================================================================
# Storage
# ============================================================================

# Relative to the working directory the tool is started from
DEFAULT_TOKENS_FILE: Final[Path] = Path("database") / "tokens.lotus"

STORE_ENCODING: Final[str] = "utf-8"
STORE_INDENT: Final[int] = 4
STORE_DIR_MODE: Final[int] = 0o755

# Serialized field names
FIELD_EXPIRE: Final[str] = "expire"
FIELD_NAME_CLIENT: Final[str] = "nameClient"

# Placeholder for records stored without a client name
UNKNOWN_CLIENT: Final[str] = "N/A"

# ============================================================================
# Time
# ============================================================================

SECONDS_PER_DAY: Final[int] = 24 * 60 * 60

# Largest 10-digit epoch in seconds; anything above is milliseconds
MILLISECOND_THRESHOLD: Final[int] = 9_999_999_999
MILLISECONDS_PER_SECOND: Final[int] = 1000

DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
MILLISECOND_SUFFIX: Final[str] = " (timestamp in ms)"
INVALID_DATE: Final[str] = "invalid timestamp"

# ============================================================================
# Tokens
# ============================================================================

# Redacted display: first PREFIX chars + "..." + last SUFFIX chars.
# Tokens shorter than twice PREFIX + SUFFIX use the SHORT widths, and
# tokens shorter than twice those keep only the short prefix.
TOKEN_PREFIX_CHARS: Final[int] = 16
TOKEN_SUFFIX_CHARS: Final[int] = 8
TOKEN_SHORT_PREFIX_CHARS: Final[int] = 4
TOKEN_SHORT_SUFFIX_CHARS: Final[int] = 4
REDACTION_MARKER: Final[str] = "..."

# Length of a generated token (hex digest of MD5)
GENERATED_TOKEN_LENGTH: Final[int] = 32

# ============================================================================
# Menu
# ============================================================================

CHOICE_LIST: Final[str] = "1"
CHOICE_ADD: Final[str] = "2"
CHOICE_REMOVE: Final[str] = "3"
CHOICE_UPDATE: Final[str] = "4"
CHOICE_CLEAN_EXPIRED: Final[str] = "5"
CHOICE_STATISTICS: Final[str] = "6"
CHOICE_EXIT: Final[str] = "7"

UPDATE_RENAME: Final[str] = "1"
UPDATE_EXTEND: Final[str] = "2"
UPDATE_SET_EXPIRATION: Final[str] = "3"

AFFIRMATIVE_ANSWERS: Final[FrozenSet[str]] = frozenset({"y", "yes"})

# Process exit codes
EXIT_OK: Final[int] = 0
EXIT_EOF: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130

# ============================================================================
# Terminal Output
# ============================================================================

COLOR_RED: Final[str] = "\033[31m"
COLOR_GREEN: Final[str] = "\033[32m"
COLOR_YELLOW: Final[str] = "\033[33m"
COLOR_BLUE: Final[str] = "\033[34m"
COLOR_CYAN: Final[str] = "\033[36m"
COLOR_RESET: Final[str] = "\033[0m"

GLYPH_SUCCESS: Final[str] = "✓"
GLYPH_ERROR: Final[str] = "✗"
GLYPH_WARNING: Final[str] = "⚠"
GLYPH_INFO: Final[str] = "ℹ"

HEADER_WIDTH: Final[int] = 60
RULE_WIDTH: Final[int] = 80

"""
Token Generator - Opaque token identifiers

Module: core.token_generator
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - MD5 digest of a random seed and a high-resolution timestamp

NOTES:
- Identifiers are only probabilistically unique. Callers must still
  check the table for a collision before inserting.
"""

import hashlib
import time
import uuid


def generate_token() -> str:
    """
    Generate a new opaque token

    Returns:
        32-character lowercase hex string
    """
    seed = f"{uuid.uuid4().hex}{time.time_ns()}"
    return hashlib.md5(seed.encode()).hexdigest()

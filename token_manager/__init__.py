"""
Token Manager

Interactive terminal tool for the client token registry stored in
database/tokens.lotus.

CHANGELOG:
[2026-10-19 v0.1.0] Initial project setup
  - Token table model and expiration rules
  - JSON persistence
  - Menu-driven CLI

ARCHITECTURE:
- Layer 1 : CLI (Console, menu loop, actions)
- Layer 2 : Persistence (JSONStore, TokenStore)
- Layer 3 : Core (TokenTable, expiration, token generation)
"""

__version__ = "0.1.0"

# Version info
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# Export main classes
from .core.token_table import TokenRecord, TokenTable
from .persistence.token_store import TokenStore
from .cli.menu import TokenManagerApp

__all__ = [
    "TokenRecord",
    "TokenTable",
    "TokenStore",
    "TokenManagerApp",
]

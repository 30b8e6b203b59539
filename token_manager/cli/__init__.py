"""
CLI module - Interactive terminal front end

Provides:
- Console: Colored operator I/O (cli.console)
- Menu actions (cli.actions)
- TokenManagerApp: Menu loop (cli.menu)

Only Console is exported here: the persistence layer reports through it,
and cli.menu depends on the persistence layer.
"""

from .console import Console

__all__ = [
    "Console",
]

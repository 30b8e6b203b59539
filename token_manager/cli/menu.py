"""
Menu Loop - Interactive token management session

Module: cli.menu
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - Main menu state machine
  - Reload-dispatch-save cycle
  - Acknowledgement pause between actions

ARCHITECTURE:
Each iteration of TokenManagerApp:
  1. Reloads the table from the TokenStore (external edits are seen)
  2. Shows the menu and reads one choice
  3. Dispatches to the matching action
  4. Saves after mutating actions (add, remove, update, clean)
  5. Waits for ENTER, unless the operator chose to exit

The table is reloaded once per iteration, never between the prompts
of a single action.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from ..core.constants import (
    APP_TITLE,
    CHOICE_ADD,
    CHOICE_CLEAN_EXPIRED,
    CHOICE_EXIT,
    CHOICE_LIST,
    CHOICE_REMOVE,
    CHOICE_STATISTICS,
    CHOICE_UPDATE,
    COLOR_CYAN,
    EXIT_OK,
)
from ..core.expiration import current_time
from ..core.token_table import TokenTable
from ..persistence.token_store import TokenStore
from . import actions
from .console import Console, colorize


class MenuState(Enum):
    """Menu loop states"""
    MAIN_MENU = "main_menu"
    LISTING = "listing"
    ADDING = "adding"
    REMOVING = "removing"
    UPDATING = "updating"
    CLEANING_EXPIRED = "cleaning_expired"
    SHOWING_STATS = "showing_stats"
    EXITING = "exiting"


MENU_CHOICES: Dict[str, MenuState] = {
    CHOICE_LIST: MenuState.LISTING,
    CHOICE_ADD: MenuState.ADDING,
    CHOICE_REMOVE: MenuState.REMOVING,
    CHOICE_UPDATE: MenuState.UPDATING,
    CHOICE_CLEAN_EXPIRED: MenuState.CLEANING_EXPIRED,
    CHOICE_STATISTICS: MenuState.SHOWING_STATS,
    CHOICE_EXIT: MenuState.EXITING,
}

MENU_LABELS: Dict[MenuState, str] = {
    MenuState.LISTING: "List tokens",
    MenuState.ADDING: "Add token",
    MenuState.REMOVING: "Remove token",
    MenuState.UPDATING: "Update token",
    MenuState.CLEANING_EXPIRED: "Clean expired tokens",
    MenuState.SHOWING_STATS: "Statistics",
    MenuState.EXITING: "Exit",
}

# States whose action may change the table and must be followed by a save
MUTATING_STATES = frozenset({
    MenuState.ADDING,
    MenuState.REMOVING,
    MenuState.UPDATING,
    MenuState.CLEANING_EXPIRED,
})


class TokenManagerApp:
    """
    Interactive token manager.

    Owns the store and the console; the table itself lives only for the
    duration of one iteration.
    """

    def __init__(
        self,
        store: Optional[TokenStore] = None,
        console: Optional[Console] = None,
        clock: Callable[[], int] = current_time,
    ):
        """
        Initialize application

        Args:
            store: Token store (defaults to the standard tokens file)
            console: Operator console (defaults to the store's console)
            clock: Returns the current epoch in seconds
        """
        self.logger = logging.getLogger("cli.menu")
        self.console = console or (store.console if store else Console())
        self.store = store or TokenStore(console=self.console)
        self.clock = clock
        self.state = MenuState.MAIN_MENU

    def run(self) -> int:
        """
        Run the menu loop until the operator exits

        Returns:
            Process exit code

        Raises:
            EOFError: Input ended
            KeyboardInterrupt: Operator pressed Ctrl-C
        """
        self.console.header(APP_TITLE)
        self.logger.info(f"Session started (file={self.store.file_path})")

        while self.run_once() is not MenuState.EXITING:
            pass

        self.logger.info("Session ended")
        return EXIT_OK

    def run_once(self) -> MenuState:
        """
        Run one iteration of the loop

        Returns:
            The state that was handled (MAIN_MENU for an invalid choice)
        """
        self.state = MenuState.MAIN_MENU
        table = self.store.load()

        self.show_menu()
        choice = self.console.prompt("\nChoose an option: ")
        self.state = MENU_CHOICES.get(choice, MenuState.MAIN_MENU)

        if self.state is MenuState.EXITING:
            self.console.info("Exiting...")
            return self.state

        if self.state is MenuState.MAIN_MENU:
            self.console.error("Invalid option!")
        else:
            self.dispatch(self.state, table)

        self.console.pause()
        return self.state

    def show_menu(self) -> None:
        self.console.write()
        self.console.write(colorize("Main menu:", COLOR_CYAN))
        for choice, state in MENU_CHOICES.items():
            self.console.write(f"{choice}. {MENU_LABELS[state]}")

    def dispatch(self, state: MenuState, table: TokenTable) -> None:
        """
        Run the action for a state and persist mutations

        Args:
            state: Selected menu state
            table: Working table loaded for this iteration
        """
        if state is MenuState.LISTING:
            self.console.header("List Tokens")
            actions.list_tokens(table, self.console, self.clock)
        elif state is MenuState.SHOWING_STATS:
            actions.show_statistics(table, self.console, self.clock)
        elif state in MUTATING_STATES:
            handler = {
                MenuState.ADDING: actions.add_token,
                MenuState.REMOVING: actions.remove_token,
                MenuState.UPDATING: actions.update_token,
                MenuState.CLEANING_EXPIRED: actions.clean_expired_tokens,
            }[state]
            changed = handler(table, self.console, self.clock)
            self.logger.debug(f"Action {state.value} finished (changed={changed})")
            if self.store.save(table):
                self.console.success("Changes saved!")

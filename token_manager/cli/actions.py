"""
Menu Actions - One function per menu entry

Module: cli.actions
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - List, add, remove, update tokens
  - Bulk cleanup of expired tokens
  - Statistics

ARCHITECTURE:
Each action receives the working TokenTable, the Console and a clock.
Validation failures are reported inline and abort the action without
touching the table. Persisting the table is the menu loop's job.

Mutating actions return True when the table changed.
"""

import logging
from typing import Callable

from ..core.constants import (
    AFFIRMATIVE_ANSWERS,
    COLOR_CYAN,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_YELLOW,
    UPDATE_EXTEND,
    UPDATE_RENAME,
    UPDATE_SET_EXPIRATION,
)
from ..core.expiration import current_time, days_from_now, format_date, is_expired
from ..core.token_generator import generate_token
from ..core.token_table import (
    InvalidDaysError,
    TokenTable,
    TokenTableError,
    parse_day_offset,
    parse_days,
    redact_token,
)
from .console import Console, colorize

logger = logging.getLogger("cli.actions")

Clock = Callable[[], int]


def is_confirmed(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def status_tag(expire: int, now: int) -> str:
    if is_expired(expire, now):
        return colorize("EXPIRED", COLOR_RED)
    return colorize("ACTIVE", COLOR_GREEN)


def list_tokens(table: TokenTable, console: Console, clock: Clock = current_time) -> None:
    """Print every token in redacted form with its client, expiration and status"""
    if table.is_empty():
        console.warning("No tokens registered")
        return

    now = clock()
    console.write()
    console.write(colorize("Token list:", COLOR_CYAN))
    console.rule()

    for token, record in table.items():
        console.write(f"{colorize('Token: ', COLOR_YELLOW)}{redact_token(token)}")
        console.write(f"  Client: {colorize(record.name_client, COLOR_CYAN)}")
        console.write(f"  Expires: {format_date(record.expire)}")
        console.write(f"  Status: {status_tag(record.expire, now)}")
        console.rule()


def add_token(table: TokenTable, console: Console, clock: Clock = current_time) -> bool:
    """
    Register a new token

    Prompts for the token (blank generates one), the client name and
    the number of days until expiration.
    """
    console.header("Add New Token")

    token = console.prompt("Enter the token (leave blank to generate one): ")
    if not token:
        token = generate_token()
        console.info(f"Generated token: {token}")

    if table.is_taken(token):
        console.error("This token already exists!")
        return False

    name_client = console.prompt("Client name: ")
    if not name_client:
        console.error("Client name is required!")
        return False

    try:
        days = parse_days(console.prompt("Days until expiration (e.g. 365): "))
    except InvalidDaysError:
        console.error("Invalid number of days!")
        return False

    try:
        record = table.add(token, name_client, days_from_now(days, clock()))
    except TokenTableError as e:
        console.error(str(e))
        return False

    console.success("Token added successfully!")
    console.info(f"Token: {token}")
    console.info(f"Expires: {format_date(record.expire)}")
    return True


def remove_token(table: TokenTable, console: Console, clock: Clock = current_time) -> bool:
    """Delete one token after explicit confirmation"""
    console.header("Remove Token")

    if table.is_empty():
        console.warning("No tokens to remove")
        return False

    list_tokens(table, console, clock)

    token = console.prompt("\nEnter the full token to remove: ")
    if token not in table:
        console.error("Token not found!")
        return False

    name_client = table.get(token).name_client
    answer = console.prompt(
        f"Are you sure you want to remove the token of '{name_client}'? (y/n): "
    )
    if not is_confirmed(answer):
        console.info("Operation cancelled")
        return False

    table.remove(token)
    console.success("Token removed successfully!")
    return True


def update_token(table: TokenTable, console: Console, clock: Clock = current_time) -> bool:
    """
    Modify one token

    Sub-options: rename the client, extend the validity by N days, or
    set the expiration to N days from now.
    """
    console.header("Update Token")

    if table.is_empty():
        console.warning("No tokens to update")
        return False

    list_tokens(table, console, clock)

    token = console.prompt("\nEnter the full token to update: ")
    if token not in table:
        console.error("Token not found!")
        return False

    console.write()
    console.write(colorize(f"Selected token: {table.get(token).name_client}", COLOR_CYAN))
    console.write(f"{UPDATE_RENAME}. Update client name")
    console.write(f"{UPDATE_EXTEND}. Extend validity")
    console.write(f"{UPDATE_SET_EXPIRATION}. Set new expiration date")

    option = console.prompt("\nChoose an option: ")

    if option == UPDATE_RENAME:
        name_client = console.prompt("New client name: ")
        if not name_client:
            return False
        table.rename(token, name_client)
        console.success("Name updated successfully!")
        return True

    if option == UPDATE_EXTEND:
        try:
            days = parse_day_offset(console.prompt("How many days to add? "))
        except InvalidDaysError:
            logger.debug("Extension skipped: day count not numeric")
            return False
        record = table.extend(token, days)
        console.success(f"Validity extended by {days} days!")
        console.info(f"New expiration date: {format_date(record.expire)}")
        return True

    if option == UPDATE_SET_EXPIRATION:
        try:
            days = parse_day_offset(console.prompt("Days from today: "))
        except InvalidDaysError:
            logger.debug("New expiration skipped: day count not numeric")
            return False
        record = table.set_expiration(token, days_from_now(days, clock()))
        console.success("New expiration date set!")
        console.info(f"Expires: {format_date(record.expire)}")
        return True

    console.error("Invalid option!")
    return False


def clean_expired_tokens(
    table: TokenTable, console: Console, clock: Clock = current_time
) -> bool:
    """Remove every expired token in one confirmed batch"""
    console.header("Clean Expired Tokens")

    expired = table.expired(clock())
    if not expired:
        console.info("No expired tokens found")
        return False

    console.write()
    console.write(colorize(f"Expired tokens found: {len(expired)}", COLOR_YELLOW))
    console.write()
    for record in expired.values():
        console.write(f"- {record.name_client} (expired on {format_date(record.expire)})")

    answer = console.prompt("\nRemove all expired tokens? (y/n): ")
    if not is_confirmed(answer):
        console.info("Operation cancelled")
        return False

    removed = table.remove_many(expired)
    console.success(f"{removed} token(s) removed!")
    return True


def show_statistics(table: TokenTable, console: Console, clock: Clock = current_time) -> None:
    """Print total, active and expired counts"""
    console.header("Statistics")

    stats = table.statistics(clock())
    console.write(f"{colorize('Total tokens: ', COLOR_CYAN)}{stats.total}")
    console.write(f"{colorize('Active tokens: ', COLOR_GREEN)}{stats.active}")
    console.write(f"{colorize('Expired tokens: ', COLOR_RED)}{stats.expired}")

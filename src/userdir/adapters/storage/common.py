"""Behaviour shared by every concrete `StorageBackend`.

Backends must agree on their error messages, on what counts as a valid user
and on how query rows are rendered, so the contract tests can run unchanged
against each of them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

NOT_CONNECTED = "Not connected"
EMPTY_DESCRIPTOR = "Connection descriptor must not be empty"
EMPTY_NAME = "User name must not be empty"
NEGATIVE_AGE = "User age must be non-negative"
AGE_TOO_LARGE = "User age is out of range"

# SQL INTEGER columns hold signed 64-bit values
MAX_INTEGER = 2**63 - 1  # pragma: no mutate
MIN_INTEGER = -(2**63)  # pragma: no mutate

USER_COLUMNS = ("id", "name", "age")

_SELECT_USERS_RE = re.compile(
    r"""
    ^\s*SELECT\s+(?P<columns>\*|\w+(?:\s*,\s*\w+)*)
    \s+FROM\s+users
    (?P<ordered>\s+ORDER\s+BY\s+id)?
    \s*;?\s*$
    """,
    re.IGNORECASE | re.VERBOSE,
)


def user_not_found(user_id: int) -> str:
    """Error message for a lookup of a missing user."""
    return f"User {user_id} not found"


def unsupported_query(query: str) -> str:
    """Error message for a statement a backend cannot run."""
    return f"Unsupported query: {query}"


def storable_id(user_id: int) -> bool:
    """Return True if `user_id` fits an INTEGER column.

    Ids outside that range can never have been assigned, so lookups of them
    fail as missing users.
    """
    return MIN_INTEGER <= user_id <= MAX_INTEGER


def validate_user(name: str, age: int) -> str | None:
    """Check a name/age pair before it is stored.

    Returns:
        str | None: An error message, or None if the pair is valid.
    """
    if not name:
        return EMPTY_NAME
    if age < 0:
        return NEGATIVE_AGE
    if age > MAX_INTEGER:
        return AGE_TOO_LARGE
    return None


def parse_select_users(query: str) -> tuple[str, ...] | None:
    """Parse ``SELECT <columns> FROM users [ORDER BY id]``.

    Keywords are case-insensitive. ``*`` expands to all user columns in table
    order. Rows are always produced in id order, so the optional ``ORDER BY id``
    clause changes nothing.

    Args:
        query: The statement to parse.

    Returns:
        tuple[str, ...] | None: The selected column names (lowercase), or None
        if the statement is not in the supported family.
    """
    if not (match := _SELECT_USERS_RE.match(query)):
        return None
    raw = match.group("columns")
    if raw == "*":
        return USER_COLUMNS
    columns = tuple(part.strip().lower() for part in raw.split(","))
    if any(column not in USER_COLUMNS for column in columns):
        return None
    return columns


def render_row(values: Iterable[object]) -> str:
    """Render one result row as its values joined with commas."""
    return ",".join(str(value) for value in values)

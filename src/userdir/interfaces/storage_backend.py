"""Storage backend interface definitions."""

import abc

#: Returned by `StorageBackend.get_user_age` when the user does not exist.
MISSING_AGE = -1


class StorageBackend(abc.ABC):
    """Abstract base class for user storage operations.

    Implementations own their connection state, their user records and a
    last-error string. Failures are reported through return values (``False``,
    ``""``, ``-1``); the last-error string carries the diagnostic message.
    """

    # --- Connection ---

    @abc.abstractmethod
    def connect(self, descriptor: str) -> bool:
        """Open a connection to the store described by `descriptor`.

        Args:
            descriptor (str): Implementation-specific connection descriptor
                (e.g. a SQLAlchemy URL).

        Returns:
            bool: True on success. After a successful call `is_connected()`
            must return True.
        """

    @abc.abstractmethod
    def disconnect(self) -> None:
        """Release the connection. `is_connected()` returns False afterwards."""

    @abc.abstractmethod
    def is_connected(self) -> bool:
        """Return True if the backend currently holds a connection."""

    # --- User records ---

    @abc.abstractmethod
    def insert_user(self, name: str, age: int) -> bool:
        """Insert a new user record.

        Args:
            name (str): The user's display name. Must not be empty.
            age (int): The user's age. Must be non-negative.

        Returns:
            bool: True if the record was stored.
        """

    @abc.abstractmethod
    def get_user_name(self, user_id: int) -> str:
        """Return the name of a user.

        Args:
            user_id (int): The id assigned on insert.

        Returns:
            str: The name, or an empty string if the user does not exist.
        """

    @abc.abstractmethod
    def get_user_age(self, user_id: int) -> int:
        """Return the age of a user.

        Args:
            user_id (int): The id assigned on insert.

        Returns:
            int: The age, or `MISSING_AGE` if the user does not exist.
        """

    @abc.abstractmethod
    def update_user(self, user_id: int, name: str, age: int) -> bool:
        """Replace the name and age of an existing user.

        Returns:
            bool: True if the user existed and was updated.
        """

    @abc.abstractmethod
    def delete_user(self, user_id: int) -> bool:
        """Delete a user.

        Returns:
            bool: True if the user existed and was deleted.
        """

    # --- Bulk queries ---

    @abc.abstractmethod
    def get_all_user_names(self) -> list[str]:
        """Return every user name in insertion order (possibly empty)."""

    @abc.abstractmethod
    def get_user_count(self) -> int:
        """Return the number of stored users (never negative)."""

    @abc.abstractmethod
    def execute_query(self, query: str, results: list[str]) -> bool:
        """Run a query and collect its rows into `results`.

        Args:
            query (str): The statement to run.
            results (list[str]): Output list. On success it is cleared and
                filled with one string per row; on failure it is left as is.

        Returns:
            bool: True if the query ran.

        Example:
            rows: list[str] = []
            if backend.execute_query("SELECT name FROM users", rows):
                print(rows)
        """

    # --- Error state ---

    @abc.abstractmethod
    def get_last_error(self) -> str:
        """Return the last error message, or an empty string if there is none."""

    @abc.abstractmethod
    def clear_error(self) -> None:
        """Reset the last error message."""

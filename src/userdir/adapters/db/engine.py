"""Engine factory and URL helpers for the SQL storage backend.

SQLite connections get a couple of PRAGMAs suited to many short
transactions; other dialects are left as their drivers configure them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_PRAGMAS = (
    "PRAGMA synchronous=NORMAL;",
    "PRAGMA temp_store=MEMORY;",
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if `url` uses the SQLite dialect, whatever the driver.

    Raises:
        sqlalchemy.exc.ArgumentError: If `url` cannot be parsed.
    """
    return make_url(str(url)).get_backend_name() == "sqlite"


def redacted(url: str | URL) -> str:
    """Render `url` with its password hidden, for logs and messages.

    Unparsable input is returned unchanged since it cannot carry a password
    field that SQLAlchemy would recognise.
    """
    try:
        return make_url(str(url)).render_as_string(hide_password=True)
    except ArgumentError:
        return str(url)


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create the Engine used by `SqlAlchemyStorageBackend`.

    Every operation commits its own transaction, so SQLite connections run
    with ``synchronous=NORMAL`` (one sync per checkpoint rather than per
    commit) and keep temporary tables in memory.

    Raises:
        sqlalchemy.exc.ArgumentError: If `url` is malformed or names an
            unknown dialect.
    """
    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _apply_pragmas(dbapi_conn: SQLiteConnection, _record) -> None:  # type: ignore
            cursor = dbapi_conn.cursor()
            for pragma in SQLITE_PRAGMAS:
                cursor.execute(pragma)
            cursor.close()

    return engine

"""SQLAlchemy Core table definitions for the user store.

Schema
- users(id PK autoincrement, name TEXT NOT NULL, age INTEGER NOT NULL)
- CHECK (age >= 0)

On SQLite the table is created with ``AUTOINCREMENT`` so ids of deleted users
are never handed out again.
"""

from sqlalchemy import CheckConstraint, Column, Integer, Table, Text

from userdir.adapters.db.metadata import metadata

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("age", Integer, nullable=False),
    CheckConstraint("age >= 0", name="age_non_negative"),
    sqlite_autoincrement=True,
)

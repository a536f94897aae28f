"""SQL text for the versioned level object tables.

Every level layout lives in its own table, `objects_v<version>`. Table names
cannot be bound as parameters, so the version token is the one value this
module interpolates into SQL. It is checked against `VERSION_PATTERN` first,
which keeps the dynamic table name safe the same way an allowlist keeps a
dynamic column name safe.

All other values (ids, object fields) are declared as typed bind parameters on
the returned `TextClause` and must be supplied at execution time.
"""

import re

from sqlalchemy import Integer, String, bindparam, text
from sqlalchemy.sql.elements import TextClause

TABLE_PREFIX = "objects_v"

# Postgres truncates identifiers at 63 bytes; the prefix takes 9 of them.
MAX_VERSION_LENGTH = 63 - len(TABLE_PREFIX)
# Versions are case-insensitive: Postgres folds unquoted identifiers to lower
# case, so `A` and `a` would address the same table anyway. `validate_version`
# returns the lower-cased token so every layer agrees on one spelling.
VERSION_PATTERN = r"^[A-Za-z0-9_]+$"

_VERSION_RE = re.compile(VERSION_PATTERN)

OBJECT_FIELDS = ("object_type", "position", "rotation", "scale", "collider")

_ID_COLUMN = {
    "postgresql": "id SERIAL PRIMARY KEY",
    "sqlite": "id INTEGER PRIMARY KEY AUTOINCREMENT",
}


class InvalidVersionError(ValueError):
    """Raised when a version token is not safe to use in a table name."""

    def __init__(self, version):
        self.version = version
        super().__init__(
            f"Invalid version {version!r}: expected 1-{MAX_VERSION_LENGTH} "
            "characters from [A-Za-z0-9_]"
        )


def validate_version(version: str) -> str:
    """Return the lower-cased `version` if it is safe to use in a table name.

    Raises:
        InvalidVersionError: If the token is empty, too long, or contains
            anything outside `[A-Za-z0-9_]`.
    """
    if (
        not isinstance(version, str)
        or len(version) > MAX_VERSION_LENGTH
        or not _VERSION_RE.fullmatch(version)
    ):
        raise InvalidVersionError(version)
    return version.lower()


def table_name(version: str) -> str:
    """Physical table name for a version, e.g. `objects_v3`."""
    return f"{TABLE_PREFIX}{validate_version(version)}"


def create_table_sql(version: str, dialect: str = "postgresql") -> TextClause:
    """DDL creating the version's table if it does not exist.

    Args:
        version: Version token.
        dialect: SQLAlchemy dialect name of the target engine. Only the id
            column differs between backends.

    Raises:
        InvalidVersionError: For an unsafe version token.
        ValueError: For a dialect with no id column definition.
    """
    try:
        id_column = _ID_COLUMN[dialect]
    except KeyError:
        raise ValueError(f"Unsupported dialect: {dialect}") from None

    return text(f"""
        CREATE TABLE IF NOT EXISTS {table_name(version)} (
          {id_column},
          object_type VARCHAR(255) NOT NULL,
          position VARCHAR(255) NOT NULL,
          scale VARCHAR(255) NOT NULL,
          rotation VARCHAR(255) NOT NULL,
          collider TEXT NOT NULL
        )
    """)


def delete_all_sql(version: str) -> TextClause:
    return text(f"DELETE FROM {table_name(version)}")


def select_all_sql(version: str) -> TextClause:
    return text(f"SELECT * FROM {table_name(version)}")


def select_by_id_sql(version: str) -> TextClause:
    """Select one row. Bind params: `id` (int)."""
    return text(f"SELECT * FROM {table_name(version)} WHERE id = :id").bindparams(
        bindparam("id", type_=Integer)
    )


def first_id_sql(version: str) -> TextClause:
    """Smallest id in the table; yields a single NULL when the table is empty."""
    return text(f"SELECT MIN(id) AS id FROM {table_name(version)}")


def row_count_sql(version: str) -> TextClause:
    return text(f"SELECT COUNT(*) AS row_count FROM {table_name(version)}")


def insert_sql(version: str) -> TextClause:
    """Insert one object. Bind params: the five `OBJECT_FIELDS` (str), in order."""
    columns = ", ".join(OBJECT_FIELDS)
    placeholders = ", ".join(f":{f}" for f in OBJECT_FIELDS)
    return text(
        f"INSERT INTO {table_name(version)} ({columns}) VALUES ({placeholders})"
    ).bindparams(*(bindparam(f, type_=String) for f in OBJECT_FIELDS))

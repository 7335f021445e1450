"""
SQL helpers shared by the repositories.

insert_ignore() is the portable "insert if absent" primitive used by the
year counter and the recycled ID pool. PostgreSQL and SQLite get a native
INSERT ... ON CONFLICT DO NOTHING; other backends fall back to a savepoint
that swallows the IntegrityError of the losing insert.
"""

from typing import Any

from sqlalchemy import Table, insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session


def dialect_name(db: Session) -> str:
    return db.get_bind().dialect.name


def insert_ignore(db: Session, table: Table, values: dict[str, Any]) -> bool:
    """
    Insert a row unless one with the same primary key already exists.

    Args:
        db: Database session
        table: Target table
        values: Column values for the new row

    Returns:
        True if the row was inserted, False if it already existed
    """
    dialect = dialect_name(db)

    if dialect == "postgresql":
        stmt = pg_insert(table).values(**values).on_conflict_do_nothing()
    elif dialect == "sqlite":
        stmt = sqlite_insert(table).values(**values).on_conflict_do_nothing()
    else:
        try:
            with db.begin_nested():
                db.execute(insert(table).values(**values))
        except IntegrityError:
            return False
        return True

    result = db.execute(stmt)
    return result.rowcount > 0

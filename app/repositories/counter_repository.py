"""
Year Counter Repository - atomic per-year sequence operations.

Every mutation is a single SQL statement so concurrent callers never see a
read-then-write window. Statements run against the Core table, bypassing the
ORM identity map, so a returned value always reflects the database.
"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.models.year_counter import YearCounter, APPOINTMENT_ID_BASELINE, counter_key
from app.utils.sql_utils import insert_ignore

counters = YearCounter.__table__


def ensure_baseline(db: Session, year: int) -> None:
    """
    Make sure the counter row for a year exists and is at least the baseline.

    Safe to call repeatedly and concurrently: the insert is a no-op when the
    row exists and the correction only ever raises seq.

    Args:
        db: Database session
        year: Four-digit year
    """
    key = counter_key(year)
    insert_ignore(db, counters, {"key": key, "seq": APPOINTMENT_ID_BASELINE})
    db.execute(
        update(counters)
        .where(counters.c.key == key, counters.c.seq < APPOINTMENT_ID_BASELINE)
        .values(seq=APPOINTMENT_ID_BASELINE)
    )


def increment_and_get(db: Session, year: int) -> int:
    """
    Atomically increment the counter for a year and return the new value.

    Uses UPDATE ... RETURNING, so the increment and the read are one
    statement. A missing row is created at the baseline first.

    Args:
        db: Database session
        year: Four-digit year

    Returns:
        The incremented sequence value
    """
    stmt = (
        update(counters)
        .where(counters.c.key == counter_key(year))
        .values(seq=counters.c.seq + 1)
        .returning(counters.c.seq)
    )

    seq = db.execute(stmt).scalar_one_or_none()
    if seq is None:
        ensure_baseline(db, year)
        seq = db.execute(stmt).scalar_one()

    return seq


def get_counter(db: Session, year: int) -> Optional[int]:
    """Current sequence value for a year, or None if never allocated."""
    return db.execute(
        select(counters.c.seq).where(counters.c.key == counter_key(year))
    ).scalar_one_or_none()


def reset_counter(db: Session, year: int) -> None:
    """
    Set the counter for a year back to the baseline, creating it if needed.

    The next allocation for the year will be BASELINE + 1.
    """
    key = counter_key(year)
    insert_ignore(db, counters, {"key": key, "seq": APPOINTMENT_ID_BASELINE})
    db.execute(
        update(counters)
        .where(counters.c.key == key)
        .values(seq=APPOINTMENT_ID_BASELINE)
    )

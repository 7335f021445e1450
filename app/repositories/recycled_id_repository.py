"""
Recycled ID Repository - pool of appointment IDs freed by deletions.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.models.recycled_id import RecycledId
from app.utils.sql_utils import insert_ignore

logger = logging.getLogger(__name__)

recycled_ids = RecycledId.__table__


def reclaim_id(db: Session, appointment_id: str, year: int) -> bool:
    """
    Put an appointment ID back into the pool.

    Args:
        db: Database session
        appointment_id: Full formatted ID (e.g. "25-10000007")
        year: Four-digit year the ID belongs to

    Returns:
        True if the ID was added, False if it was already in the pool
    """
    inserted = insert_ignore(db, recycled_ids, {"id": appointment_id, "year": year})
    if not inserted:
        logger.warning("Appointment ID %s is already in the recycled pool", appointment_id)
    return inserted


def claim_id(db: Session) -> Optional[str]:
    """
    Atomically remove and return the lexically smallest ID in the pool.

    Select-minimum and delete happen in one DELETE ... RETURNING statement.
    On PostgreSQL the inner SELECT takes the row with FOR UPDATE SKIP LOCKED,
    so a concurrent claimer moves on to the next ID (or finds the pool empty)
    instead of receiving the same one. SQLite serializes writers and ignores
    the locking clause.

    Returns:
        The claimed ID, or None if the pool is empty
    """
    oldest = (
        select(recycled_ids.c.id)
        .order_by(recycled_ids.c.id)
        .limit(1)
        .with_for_update(skip_locked=True)
        .scalar_subquery()
    )
    return db.execute(
        delete(recycled_ids)
        .where(recycled_ids.c.id == oldest)
        .returning(recycled_ids.c.id)
    ).scalar_one_or_none()


def list_recycled_ids(db: Session) -> List[str]:
    """All pooled IDs in claim order."""
    return list(
        db.execute(select(recycled_ids.c.id).order_by(recycled_ids.c.id)).scalars()
    )


def clear_pool(db: Session) -> int:
    """
    Remove every ID from the pool.

    Returns:
        Number of IDs removed
    """
    result = db.execute(delete(recycled_ids))
    return result.rowcount

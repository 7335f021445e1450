"""
Appointment ID Service

Allocates human-facing appointment IDs of the form YY-SEQ.
Recycled IDs are reissued first; otherwise the per-year counter is advanced.
No application-level locking: uniqueness rests on the two atomic database
primitives in the counter and recycled ID repositories.
"""

import logging
import re
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.repositories.counter_repository import (
    ensure_baseline,
    increment_and_get,
    reset_counter,
)
from app.repositories.recycled_id_repository import claim_id, clear_pool

logger = logging.getLogger(__name__)

APPOINTMENT_ID_PATTERN = re.compile(r"^(\d{2})-(\d+)$")


class AllocationFailedError(Exception):
    """Raised when the database cannot produce an appointment ID."""

    pass


def format_appointment_id(year: int, seq: int) -> str:
    """
    Format an appointment ID.

    Example:
        >>> format_appointment_id(2025, 10000042)
        "25-10000042"
    """
    return f"{year % 100:02d}-{seq}"


def parse_appointment_year(appointment_id: Optional[str]) -> Optional[int]:
    """
    Four-digit year encoded in an appointment ID prefix.

    The two-digit prefix is mapped to 2000 + YY, so only 21st century
    years round-trip.

    Returns:
        The year, or None if the ID is missing or malformed
    """
    if not appointment_id:
        return None
    match = APPOINTMENT_ID_PATTERN.match(appointment_id)
    if not match:
        return None
    return 2000 + int(match.group(1))


def next_appointment_id(db: Session, year: int) -> str:
    """
    Allocate the next appointment ID.

    Claims the smallest recycled ID if the pool is not empty, otherwise
    raises the year counter to its baseline if needed and increments it.
    The allocation joins the caller's transaction; it is never retried.

    Args:
        db: Database session
        year: Four-digit year for counter-derived IDs

    Returns:
        The allocated ID (e.g. "25-10000001")

    Raises:
        AllocationFailedError: If any database operation fails
    """
    try:
        recycled = claim_id(db)
        if recycled is not None:
            logger.info("Reissuing recycled appointment ID %s", recycled)
            return recycled

        ensure_baseline(db, year)
        seq = increment_and_get(db, year)
    except SQLAlchemyError as e:
        logger.error("Appointment ID allocation failed for %s: %s", year, e)
        raise AllocationFailedError(
            f"Failed to allocate appointment ID for {year}"
        ) from e

    return format_appointment_id(year, seq)


def reset_allocation_state(db: Session, year: int) -> int:
    """
    Reset the year counter to its baseline and empty the recycled pool.

    Destructive, meant for non-production environments. Running it twice
    leaves the same state as running it once.

    Returns:
        Number of recycled IDs discarded
    """
    reset_counter(db, year)
    discarded = clear_pool(db)
    logger.warning(
        "Appointment counter for %s reset to baseline, %d recycled IDs discarded",
        year,
        discarded,
    )
    return discarded

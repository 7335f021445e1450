"""
Telecalling Repository - centralized telecalling record queries.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.models.telecalling import TelecallingRecord


def get_record(db: Session, record_id: UUID) -> Optional[TelecallingRecord]:
    """
    Get a telecalling record by primary key.

    Args:
        db: Database session
        record_id: UUID of the record

    Returns:
        TelecallingRecord or None if not found
    """
    return db.get(TelecallingRecord, record_id)


def get_record_by_appointment_id(
    db: Session, appointment_id: str
) -> Optional[TelecallingRecord]:
    return (
        db.query(TelecallingRecord)
        .filter(TelecallingRecord.appointment_id == appointment_id)
        .first()
    )


def list_records(db: Session) -> List[TelecallingRecord]:
    """
    Get all telecalling records, newest first.

    Returns:
        List of TelecallingRecord objects
    """
    return (
        db.query(TelecallingRecord)
        .order_by(TelecallingRecord.created_at.desc())
        .all()
    )


def add_record(db: Session, record: TelecallingRecord) -> TelecallingRecord:
    """
    Stage and flush a new record.

    Raises:
        IntegrityError: If the appointment ID is already taken
    """
    db.add(record)
    db.flush()
    return record


def remove_record(db: Session, record: TelecallingRecord) -> None:
    db.delete(record)
    db.flush()

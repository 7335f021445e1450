"""
Telecalling Service

Creates telecalling records with freshly allocated appointment IDs and
returns the IDs of deleted records to the recycled pool.
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.telecalling import AddedBy, RecordStatus, TelecallingRecord
from app.repositories.recycled_id_repository import reclaim_id
from app.repositories.telecalling_repository import (
    add_record,
    get_record,
    list_records,
    remove_record,
)
from app.schemas.telecalling import TelecallingCreate, TelecallingUpdate
from app.services.appointment_id_service import (
    next_appointment_id,
    parse_appointment_year,
)

logger = logging.getLogger(__name__)

PLACEHOLDER = "PENDING"
DRAFT_OWNER_NAME = "New Applicant"
APPOINTMENT_ID_INDEX = "ix_telecalling_records_appointment_id"

# Columns that cannot be cleared by an update
REQUIRED_FIELDS = {
    "car_registration_number",
    "year_of_registration",
    "owner_name",
    "ownership_serial_number",
    "make",
    "vehicle_model",
    "variant",
    "inspection_status",
    "approval_status",
    "priority",
    "added_by",
}


class TelecallingNotFoundError(Exception):
    pass


class DuplicateAppointmentIdError(Exception):
    """
    An allocated appointment ID collided with an existing record.

    Unreachable while allocation is atomic, so it marks a data-integrity
    defect. It is surfaced, never retried with another ID.
    """

    def __init__(self, appointment_id: str):
        self.appointment_id = appointment_id
        super().__init__(f"Appointment ID already assigned: {appointment_id}")


def _is_appointment_id_conflict(exc: IntegrityError) -> bool:
    # PostgreSQL reports the violated index, SQLite names the column
    constraint = getattr(getattr(exc.orig, "diag", None), "constraint_name", None)
    if constraint:
        return constraint == APPOINTMENT_ID_INDEX
    message = str(exc.orig)
    return (
        APPOINTMENT_ID_INDEX in message
        or "telecalling_records.appointment_id" in message
    )


def _persist(db: Session, record: TelecallingRecord) -> TelecallingRecord:
    try:
        return add_record(db, record)
    except IntegrityError as e:
        if not _is_appointment_id_conflict(e):
            raise
        logger.error(
            "Data integrity defect: appointment ID %s was allocated twice: %s",
            record.appointment_id,
            e,
        )
        raise DuplicateAppointmentIdError(record.appointment_id) from e


def create_draft(db: Session, year: Optional[int] = None) -> TelecallingRecord:
    """
    Reserve an appointment ID by persisting a placeholder record.

    The ID is bound to a record before the telecaller fills in the form.
    An abandoned draft stays behind as an inert placeholder.

    Args:
        db: Database session
        year: Four-digit year (default: current year)

    Returns:
        The draft TelecallingRecord

    Raises:
        AllocationFailedError: If no appointment ID could be allocated
        DuplicateAppointmentIdError: If the allocated ID is already in use
    """
    year = year or datetime.now().year
    appointment_id = next_appointment_id(db, year)

    record = TelecallingRecord(
        appointment_id=appointment_id,
        status=RecordStatus.DRAFT,
        owner_name=DRAFT_OWNER_NAME,
        car_registration_number=PLACEHOLDER,
        year_of_registration=str(year),
        ownership_serial_number=1,
        make=PLACEHOLDER,
        vehicle_model=PLACEHOLDER,
        variant=PLACEHOLDER,
        inspection_status="Pending",
        added_by=AddedBy.TELECALLER,
    )
    _persist(db, record)

    logger.info("Draft record %s created with appointment ID %s", record.id, appointment_id)
    return record


def create_final(
    db: Session, payload: TelecallingCreate, year: Optional[int] = None
) -> TelecallingRecord:
    """
    Create a fully specified record with a new appointment ID.

    Args:
        db: Database session
        payload: Validated record fields
        year: Four-digit year (default: current year)

    Returns:
        The created TelecallingRecord

    Raises:
        AllocationFailedError: If no appointment ID could be allocated
        DuplicateAppointmentIdError: If the allocated ID is already in use
    """
    year = year or datetime.now().year
    appointment_id = next_appointment_id(db, year)

    record = TelecallingRecord(
        appointment_id=appointment_id,
        status=RecordStatus.ACTIVE,
        **payload.model_dump(),
    )
    _persist(db, record)

    logger.info("Record %s created with appointment ID %s", record.id, appointment_id)
    return record


def get_record_or_404(db: Session, record_id: UUID) -> TelecallingRecord:
    record = get_record(db, record_id)
    if not record:
        raise TelecallingNotFoundError(f"Record not found: {record_id}")
    return record


def get_all_records(db: Session) -> List[TelecallingRecord]:
    return list_records(db)


def update_record(
    db: Session, record_id: UUID, payload: TelecallingUpdate
) -> TelecallingRecord:
    """
    Apply a partial update. Saving a draft promotes it to active.

    Raises:
        TelecallingNotFoundError: If the record does not exist
    """
    record = get_record_or_404(db, record_id)

    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(record, field, value)

    if record.status == RecordStatus.DRAFT:
        record.status = RecordStatus.ACTIVE

    db.flush()
    return record


def recycle_appointment_id(db: Session, appointment_id: Optional[str]) -> bool:
    """
    Return a deleted record's appointment ID to the recycled pool.

    Runs in a savepoint so a failure here never undoes the deletion.
    Missing or malformed IDs are skipped.

    Returns:
        True if the ID was added to the pool
    """
    year = parse_appointment_year(appointment_id)
    if year is None:
        if appointment_id:
            logger.debug("Skipping recycle of malformed appointment ID %r", appointment_id)
        return False

    try:
        with db.begin_nested():
            return reclaim_id(db, appointment_id, year)
    except SQLAlchemyError as e:
        logger.warning("Could not recycle appointment ID %s: %s", appointment_id, e)
        return False


def delete_record(db: Session, record_id: UUID) -> bool:
    """
    Delete a record and recycle its appointment ID.

    Deletion succeeds regardless of the recycle outcome.

    Returns:
        True if the appointment ID went back into the pool

    Raises:
        TelecallingNotFoundError: If the record does not exist
    """
    record = get_record_or_404(db, record_id)
    appointment_id = record.appointment_id

    remove_record(db, record)
    logger.info("Record %s deleted (appointment ID %s)", record_id, appointment_id)

    return recycle_appointment_id(db, appointment_id)

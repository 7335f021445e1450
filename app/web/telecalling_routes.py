"""
Telecalling API routes.
Record CRUD plus the appointment ID draft and preview endpoints.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.telecalling import (
    DeleteResponse,
    NextIdResponse,
    TelecallingCreate,
    TelecallingResponse,
    TelecallingUpdate,
)
from app.services.appointment_id_service import (
    AllocationFailedError,
    next_appointment_id,
)
from app.services.telecalling_service import (
    DuplicateAppointmentIdError,
    TelecallingNotFoundError,
    create_draft,
    create_final,
    delete_record,
    get_all_records,
    get_record_or_404,
    update_record,
)
from app.utils.uuid_utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/telecalling", tags=["Telecalling"])


def _creation_failed(exc: Exception) -> HTTPException:
    if isinstance(exc, AllocationFailedError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to allocate appointment ID",
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Appointment ID conflict, record not created",
    )


@router.get("", response_model=List[TelecallingResponse])
def list_telecalling_records(db: Session = Depends(get_db)):
    return get_all_records(db)


@router.post("", response_model=TelecallingResponse, status_code=201)
def create_telecalling_record(
    payload: TelecallingCreate, db: Session = Depends(get_db)
):
    try:
        return create_final(db, payload)
    except (AllocationFailedError, DuplicateAppointmentIdError) as e:
        raise _creation_failed(e)


@router.post("/draft", response_model=TelecallingResponse)
def create_draft_record(db: Session = Depends(get_db)):
    try:
        return create_draft(db)
    except (AllocationFailedError, DuplicateAppointmentIdError) as e:
        raise _creation_failed(e)


@router.get("/next-id", response_model=NextIdResponse)
def preview_next_id(db: Session = Depends(get_db)):
    """
    Show the next appointment ID without creating a record.

    The allocation is consumed: a recycled ID is gone and a counter value
    becomes a gap, whether or not the client ever uses it.
    """
    try:
        appointment_id = next_appointment_id(db, datetime.now().year)
    except AllocationFailedError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate appointment ID",
        )
    return NextIdResponse(id=appointment_id)


@router.get("/{record_id}", response_model=TelecallingResponse)
def get_telecalling_record(record_id: str, db: Session = Depends(get_db)):
    record_uuid = validate_uuid(record_id, "Record ID")
    try:
        return get_record_or_404(db, record_uuid)
    except TelecallingNotFoundError:
        raise HTTPException(status_code=404, detail="Record not found")


@router.put("/{record_id}", response_model=TelecallingResponse)
def update_telecalling_record(
    record_id: str, payload: TelecallingUpdate, db: Session = Depends(get_db)
):
    record_uuid = validate_uuid(record_id, "Record ID")
    try:
        return update_record(db, record_uuid, payload)
    except TelecallingNotFoundError:
        raise HTTPException(status_code=404, detail="Record not found")


@router.delete("/{record_id}", response_model=DeleteResponse)
def delete_telecalling_record(record_id: str, db: Session = Depends(get_db)):
    record_uuid = validate_uuid(record_id, "Record ID")
    try:
        recycled = delete_record(db, record_uuid)
    except TelecallingNotFoundError:
        raise HTTPException(status_code=404, detail="Record not found")

    return DeleteResponse(
        message="Record deleted successfully", id=record_uuid, recycled=recycled
    )

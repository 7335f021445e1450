"""
Admin Counter Routes - appointment ID counter maintenance
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.models.year_counter import APPOINTMENT_ID_BASELINE
from app.schemas.telecalling import CounterResetResponse
from app.services.appointment_id_service import (
    format_appointment_id,
    reset_allocation_state,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin Counter"])


@router.post("/reset-counter", response_model=CounterResetResponse)
def reset_appointment_counter(db: Session = Depends(get_db)):
    """Reset this year's counter to the baseline and clear the recycled pool."""
    if not settings.ALLOW_COUNTER_RESET:
        logger.warning("Rejected appointment counter reset: ALLOW_COUNTER_RESET is off")
        raise HTTPException(status_code=403, detail="Counter reset is disabled")

    year = datetime.now().year
    discarded = reset_allocation_state(db, year)

    return CounterResetResponse(
        message=f"Counter reset to {APPOINTMENT_ID_BASELINE}. "
        f"Next ID will be {format_appointment_id(year, APPOINTMENT_ID_BASELINE + 1)}",
        year=year,
        seq=APPOINTMENT_ID_BASELINE,
        discarded_ids=discarded,
    )

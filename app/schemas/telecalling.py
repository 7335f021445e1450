from pydantic import ConfigDict, EmailStr, Field, field_validator
from datetime import datetime
from uuid import UUID
from typing import Optional
from app.models.telecalling import AddedBy, RecordStatus
from app.schemas.base import BaseResponseSchema, CamelModel


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class TelecallingCreate(CamelModel):
    """Payload for the direct-create path. Any client appointmentId is ignored."""

    car_registration_number: str = Field(min_length=1, max_length=32)
    year_of_registration: str = Field(min_length=1, max_length=8)
    owner_name: str = Field(min_length=1, max_length=255)
    ownership_serial_number: int = Field(ge=1)
    make: str = Field(min_length=1, max_length=100)
    vehicle_model: str = Field(min_length=1, max_length=100, alias="model")
    variant: str = Field(min_length=1, max_length=100)
    year_of_manufacture: Optional[str] = Field(default=None, max_length=8)
    odometer_reading_in_kms: Optional[float] = Field(default=None, ge=0)

    # email-validator rejects addresses longer than 254 characters
    email_address: Optional[EmailStr] = None
    customer_contact_number: Optional[str] = Field(default=None, max_length=20)
    city: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=12)

    appointment_source: Optional[str] = Field(default=None, max_length=100)
    vehicle_status: Optional[str] = Field(default=None, max_length=100)
    allocated_to: Optional[str] = Field(default=None, max_length=255)
    inspection_status: str = Field(default="Pending", max_length=50)
    approval_status: str = Field(default="Pending", max_length=50)
    priority: str = Field(default="Medium", max_length=20)
    inspection_date_time: Optional[datetime] = None
    inspection_address: Optional[str] = Field(default=None, max_length=500)
    inspection_engineer_number: Optional[str] = Field(default=None, max_length=20)

    ncd_ucd_name: Optional[str] = Field(default=None, max_length=255)
    rep_name: Optional[str] = Field(default=None, max_length=255)
    rep_contact: Optional[str] = Field(default=None, max_length=20)
    bank_source: Optional[str] = Field(default=None, max_length=100)
    reference_name: Optional[str] = Field(default=None, max_length=255)

    remarks: Optional[str] = None
    additional_notes: Optional[str] = None
    added_by: AddedBy = AddedBy.TELECALLER
    created_by: Optional[str] = Field(default=None, max_length=255)

    @field_validator("email_address", "inspection_date_time", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        return _blank_to_none(v)


class TelecallingUpdate(CamelModel):
    """Partial update. The appointment ID is immutable and not accepted here."""

    car_registration_number: Optional[str] = Field(
        default=None, min_length=1, max_length=32
    )
    year_of_registration: Optional[str] = Field(default=None, min_length=1, max_length=8)
    owner_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    ownership_serial_number: Optional[int] = Field(default=None, ge=1)
    make: Optional[str] = Field(default=None, min_length=1, max_length=100)
    vehicle_model: Optional[str] = Field(
        default=None, min_length=1, max_length=100, alias="model"
    )
    variant: Optional[str] = Field(default=None, min_length=1, max_length=100)
    year_of_manufacture: Optional[str] = Field(default=None, max_length=8)
    odometer_reading_in_kms: Optional[float] = Field(default=None, ge=0)

    email_address: Optional[EmailStr] = None
    customer_contact_number: Optional[str] = Field(default=None, max_length=20)
    city: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=12)

    appointment_source: Optional[str] = Field(default=None, max_length=100)
    vehicle_status: Optional[str] = Field(default=None, max_length=100)
    allocated_to: Optional[str] = Field(default=None, max_length=255)
    inspection_status: Optional[str] = Field(default=None, max_length=50)
    approval_status: Optional[str] = Field(default=None, max_length=50)
    priority: Optional[str] = Field(default=None, max_length=20)
    inspection_date_time: Optional[datetime] = None
    inspection_address: Optional[str] = Field(default=None, max_length=500)
    inspection_engineer_number: Optional[str] = Field(default=None, max_length=20)

    ncd_ucd_name: Optional[str] = Field(default=None, max_length=255)
    rep_name: Optional[str] = Field(default=None, max_length=255)
    rep_contact: Optional[str] = Field(default=None, max_length=20)
    bank_source: Optional[str] = Field(default=None, max_length=100)
    reference_name: Optional[str] = Field(default=None, max_length=255)

    remarks: Optional[str] = None
    additional_notes: Optional[str] = None
    added_by: Optional[AddedBy] = None
    created_by: Optional[str] = Field(default=None, max_length=255)

    @field_validator("email_address", "inspection_date_time", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        return _blank_to_none(v)


class TelecallingResponse(BaseResponseSchema):
    """Full telecalling record"""

    id: UUID
    appointment_id: Optional[str] = None
    status: RecordStatus

    car_registration_number: str
    year_of_registration: str
    owner_name: str
    ownership_serial_number: int
    make: str
    vehicle_model: str = Field(alias="model")
    variant: str
    year_of_manufacture: Optional[str] = None
    odometer_reading_in_kms: Optional[float] = None

    email_address: Optional[str] = None
    customer_contact_number: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None

    appointment_source: Optional[str] = None
    vehicle_status: Optional[str] = None
    allocated_to: Optional[str] = None
    inspection_status: str
    approval_status: str
    priority: str
    inspection_date_time: Optional[datetime] = None
    inspection_address: Optional[str] = None
    inspection_engineer_number: Optional[str] = None

    ncd_ucd_name: Optional[str] = None
    rep_name: Optional[str] = None
    rep_contact: Optional[str] = None
    bank_source: Optional[str] = None
    reference_name: Optional[str] = None

    remarks: Optional[str] = None
    additional_notes: Optional[str] = None
    added_by: AddedBy
    created_by: Optional[str] = None

    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NextIdResponse(CamelModel):
    id: str


class DeleteResponse(CamelModel):
    message: str
    id: UUID
    recycled: bool


class CounterResetResponse(CamelModel):
    message: str
    year: int
    seq: int
    discarded_ids: int

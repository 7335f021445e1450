from uuid import UUID as PyUUID
from sqlalchemy import (
    String,
    Text,
    Integer,
    Float,
    DateTime,
    Enum as SQLEnum,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
import uuid
import enum
from app.database import Base


class RecordStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"


class AddedBy(str, enum.Enum):
    CUSTOMER = "Customer"
    TELECALLER = "Telecaller"


class TelecallingRecord(Base):
    """
    Telecalling engagement (vehicle inspection appointment).

    Drafts are persisted with placeholder values as soon as their
    appointment ID is allocated; deleting a record removes the row.
    """

    __tablename__ = "telecalling_records"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    appointment_id: Mapped[str | None] = mapped_column(
        String(32), unique=True, nullable=True, index=True
    )
    status: Mapped[RecordStatus] = mapped_column(
        SQLEnum(RecordStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=RecordStatus.ACTIVE,
        index=True,
    )

    # Vehicle and owner
    car_registration_number: Mapped[str] = mapped_column(String(32), nullable=False)
    year_of_registration: Mapped[str] = mapped_column(String(8), nullable=False)
    owner_name: Mapped[str] = mapped_column(String(255), nullable=False)
    ownership_serial_number: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1
    )
    make: Mapped[str] = mapped_column(String(100), nullable=False)
    vehicle_model: Mapped[str] = mapped_column(String(100), nullable=False)
    variant: Mapped[str] = mapped_column(String(100), nullable=False)
    year_of_manufacture: Mapped[str | None] = mapped_column(String(8), nullable=True)
    odometer_reading_in_kms: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Contact
    email_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    customer_contact_number: Mapped[str | None] = mapped_column(
        String(20), nullable=True
    )
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(12), nullable=True)

    # Workflow
    appointment_source: Mapped[str | None] = mapped_column(String(100), nullable=True)
    vehicle_status: Mapped[str | None] = mapped_column(String(100), nullable=True)
    allocated_to: Mapped[str | None] = mapped_column(String(255), nullable=True)
    inspection_status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="Pending"
    )
    approval_status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="Pending"
    )
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default="Medium")
    inspection_date_time: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True
    )
    inspection_address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    inspection_engineer_number: Mapped[str | None] = mapped_column(
        String(20), nullable=True
    )

    # Dealer and referral
    ncd_ucd_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    rep_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    rep_contact: Mapped[str | None] = mapped_column(String(20), nullable=True)
    bank_source: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reference_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Notes
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    additional_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    added_by: Mapped[AddedBy] = mapped_column(
        SQLEnum(AddedBy, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=AddedBy.TELECALLER,
    )
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now, nullable=False
    )

    def __repr__(self):
        return f"<TelecallingRecord {self.appointment_id or self.id} ({self.status.value})>"

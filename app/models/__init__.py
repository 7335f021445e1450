from app.models.year_counter import YearCounter, APPOINTMENT_ID_BASELINE
from app.models.recycled_id import RecycledId
from app.models.telecalling import TelecallingRecord, RecordStatus, AddedBy

__all__ = [
    "YearCounter",
    "APPOINTMENT_ID_BASELINE",
    "RecycledId",
    "TelecallingRecord",
    "RecordStatus",
    "AddedBy",
]

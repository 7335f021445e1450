"""
Year Counter Model
Durable per-year sequence for appointment ID generation.
"""

from sqlalchemy import BigInteger, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from app.database import Base

# The first issued sequence of a year is BASELINE + 1
APPOINTMENT_ID_BASELINE = 10_000_000


def counter_key(year: int) -> str:
    return f"appointment_id_{year}"


class YearCounter(Base):
    """
    Counter for generating appointment ID sequences, one row per year.
    Mutated only through atomic UPDATE ... RETURNING statements.
    """

    __tablename__ = "year_counters"

    key: Mapped[str] = mapped_column(String(50), primary_key=True)
    seq: Mapped[int] = mapped_column(
        BigInteger, default=APPOINTMENT_ID_BASELINE, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now, nullable=False
    )

    def __repr__(self):
        return f"<YearCounter {self.key}: {self.seq}>"

"""
Recycled ID Model
Appointment IDs freed by deleted records, waiting to be reissued.
"""

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from app.database import Base


class RecycledId(Base):
    """
    Pool entry for a reusable appointment ID.

    The primary key is the full formatted ID (e.g. "25-10000005"), so an ID
    can sit in the pool at most once. Claims take the lexically smallest ID.
    """

    __tablename__ = "recycled_ids"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False
    )

    def __repr__(self):
        return f"<RecycledId {self.id} ({self.year})>"

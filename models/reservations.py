from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Optional, List, TYPE_CHECKING
from sqlmodel import Field, SQLModel, Relationship


class ReservationStatus(str, Enum):
    BOOKED = "booked"
    SEATED = "seated"
    FINISHED = "finished"
    CANCELLED = "cancelled"


class Reservation(SQLModel, table=True):
    __tablename__ = "reservations"

    reservation_id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=50, nullable=False)
    last_name: str = Field(max_length=50, nullable=False)
    mobile_number: str = Field(max_length=20, nullable=False)
    reservation_date: date = Field(nullable=False, index=True)
    reservation_time: time = Field(nullable=False)
    people: int = Field(nullable=False)
    status: str = Field(default=ReservationStatus.BOOKED.value, max_length=20, nullable=False)

    created_at: Optional[datetime] = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relaciones
    tables: List["Table"] = Relationship(back_populates="reservation")

if TYPE_CHECKING:
    from models.tables import Table

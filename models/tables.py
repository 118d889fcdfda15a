from datetime import datetime, timezone
from typing import Optional, TYPE_CHECKING
from sqlmodel import Field, SQLModel, Relationship


class Table(SQLModel, table=True):
    __tablename__ = "tables"

    table_id: Optional[int] = Field(default=None, primary_key=True)
    table_name: str = Field(nullable=False, index=True)
    capacity: int = Field(nullable=False)

    # Clave Foránea: no nula si y solo si la mesa está ocupada
    reservation_id: Optional[int] = Field(default=None, foreign_key="reservations.reservation_id")

    created_at: Optional[datetime] = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relaciones
    reservation: Optional["Reservation"] = Relationship(back_populates="tables")

    @property
    def is_occupied(self) -> bool:
        return self.reservation_id is not None

if TYPE_CHECKING:
    from models.reservations import Reservation

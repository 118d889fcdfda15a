from sqlmodel import SQLModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from schemas.reservations_schema import ReservationRead


class TableRead(SQLModel):
    table_id: int
    table_name: str
    capacity: int
    reservation_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TableRequest(SQLModel):
    """
    Cuerpo de las peticiones de mesas: `{"data": {...}}`.
    Los campos de `data` se validan en el servicio para devolver 400 con mensaje.
    """
    data: Dict[str, Any] = Field(default_factory=dict)


class TableResponse(SQLModel):
    data: TableRead


class TableListResponse(SQLModel):
    data: List[TableRead]


class SeatingRead(SQLModel):
    """Estado de la mesa y de su reserva después de sentar o liberar."""
    table: TableRead
    reservation: ReservationRead


class SeatingResponse(SQLModel):
    data: SeatingRead

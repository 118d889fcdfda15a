import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from core.database import SessionDep
from core.errors import NotFoundError, PersistenceError
from models.reservations import Reservation, ReservationStatus
from schemas.reservations_schema import (
    ReservationListResponse,
    ReservationRequest,
    ReservationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reservations", tags=["Reservas"])


# ==========================================================
# GET → Listar reservas, opcionalmente por fecha
# ==========================================================
@router.get("", response_model=ReservationListResponse)
def list_reservations(
    session: SessionDep,
    reservation_date: Optional[date] = Query(None, alias="date", description="Filtrar por fecha de la reserva"),
):
    query = select(Reservation)
    if reservation_date:
        query = query.where(Reservation.reservation_date == reservation_date)
    query = query.order_by(Reservation.reservation_date, Reservation.reservation_time)
    return {"data": session.exec(query).all()}


# ==========================================================
# GET → Obtener una reserva específica
# ==========================================================
@router.get("/{reservation_id}", response_model=ReservationResponse)
def read_reservation(reservation_id: int, session: SessionDep):
    reservation = session.get(Reservation, reservation_id)
    if not reservation:
        raise NotFoundError("Reservation", reservation_id)
    return {"data": reservation}


# ==========================================================
# POST → Crear una reserva (siempre empieza como "booked")
# ==========================================================
@router.post("", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
def create_reservation(body: ReservationRequest, session: SessionDep):
    try:
        reservation = Reservation.model_validate(body.data.model_dump())
        reservation.status = ReservationStatus.BOOKED.value

        session.add(reservation)
        session.commit()
        session.refresh(reservation)
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Error al crear la reserva")
        raise PersistenceError(f"Reservation could not be created: {e}") from e

    return {"data": reservation}

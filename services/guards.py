"""
Validaciones de mesas. Cada guarda devuelve el error a lanzar o None,
y el servicio las evalúa en orden deteniéndose en la primera que falla.
"""
from typing import Any, Mapping, Optional

from core.errors import ConflictError, InvalidValueError, MissingFieldError, TableServiceError
from models.reservations import Reservation, ReservationStatus
from models.tables import Table

MIN_TABLE_NAME_LENGTH = 2


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


# ----------------------------------------------------------------------
# VALIDACIONES DEL CUERPO (create / seat)
# ----------------------------------------------------------------------

def body_data_has(field: str):
    def guard(data: Mapping[str, Any]) -> Optional[TableServiceError]:
        if _is_missing(data.get(field)):
            return MissingFieldError(field)
        return None
    guard.__name__ = f"body_data_has_{field}"
    return guard


def table_name_is_valid_length(data: Mapping[str, Any]) -> Optional[TableServiceError]:
    table_name = data["table_name"]
    if not isinstance(table_name, str) or len(table_name) < MIN_TABLE_NAME_LENGTH:
        return InvalidValueError(
            f"table_name must be at least {MIN_TABLE_NAME_LENGTH} characters"
        )
    return None


def capacity_is_valid_number(data: Mapping[str, Any]) -> Optional[TableServiceError]:
    capacity = data["capacity"]
    # bool es subclase de int en Python
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        return InvalidValueError("capacity must be an integer greater than 0")
    return None


def reservation_id_is_valid(data: Mapping[str, Any]) -> Optional[TableServiceError]:
    reservation_id = data["reservation_id"]
    if isinstance(reservation_id, bool) or not isinstance(reservation_id, int):
        return InvalidValueError("reservation_id must be an integer")
    return None


def optional_reservation_id_is_valid(data: Mapping[str, Any]) -> Optional[TableServiceError]:
    if _is_missing(data.get("reservation_id")):
        return None
    return reservation_id_is_valid(data)


CREATE_GUARDS = (
    body_data_has("table_name"),
    body_data_has("capacity"),
    table_name_is_valid_length,
    capacity_is_valid_number,
    optional_reservation_id_is_valid,
)

SEAT_BODY_GUARDS = (
    body_data_has("reservation_id"),
    reservation_id_is_valid,
)


# ----------------------------------------------------------------------
# VALIDACIONES DE ESTADO (mesa + reserva ya cargadas)
# ----------------------------------------------------------------------

def check_if_seated(table: Table, reservation: Reservation) -> Optional[TableServiceError]:
    if reservation.status == ReservationStatus.SEATED.value:
        return ConflictError("this reservation is already seated")
    return None


def check_if_finished(table: Table, reservation: Reservation) -> Optional[TableServiceError]:
    if reservation.status == ReservationStatus.FINISHED.value:
        return ConflictError(
            f"Reservation {reservation.reservation_id} is already finished"
        )
    return None


def check_if_occupied(table: Table, reservation: Reservation) -> Optional[TableServiceError]:
    if table.is_occupied:
        return ConflictError(
            f"Table {table.table_id} is occupied, choose different table"
        )
    return None


def check_capacity(table: Table, reservation: Reservation) -> Optional[TableServiceError]:
    if reservation.people > table.capacity:
        return ConflictError(
            f"Table {table.table_id} can not seat {reservation.people} people, "
            f"choose table with higher capacity"
        )
    return None


def check_if_not_occupied(table: Table) -> Optional[TableServiceError]:
    if not table.is_occupied:
        return ConflictError(f"Table {table.table_id} is not occupied")
    return None


SEAT_GUARDS = (
    check_if_seated,
    check_if_occupied,
    check_capacity,
)

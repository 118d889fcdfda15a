import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from core.config import settings
from core.errors import NotFoundError, TableServiceError
from models.reservations import Reservation
from models.tables import Table
from repositories.table_store import TableStore
from services import guards

logger = logging.getLogger(__name__)


class TableAssignmentService:
    """
    Operaciones validadas sobre mesas y su asignación a reservas.

    Una mesa pasa de Libre a Ocupada con `seat_reservation` y vuelve a Libre
    con `finish_reservation`. Cada operación evalúa sus guardas en orden y
    lanza el primer error encontrado; solo entonces escribe, en una única
    operación del almacenamiento que actualiza mesa y reserva juntas.
    """

    def __init__(self, store: TableStore, reject_finished: Optional[bool] = None):
        self.store = store
        if reject_finished is None:
            reject_finished = settings.REJECT_FINISHED_RESERVATIONS
        self.seat_guards = guards.SEAT_GUARDS
        if reject_finished:
            self.seat_guards = (guards.check_if_seated, guards.check_if_finished) + guards.SEAT_GUARDS[1:]

    # ==================================================================
    # LECTURA Y CREACIÓN
    # ==================================================================

    def list(self) -> List[Table]:
        return self.store.list_tables()

    def read(self, table_id: int) -> Table:
        table = self.store.read_table(table_id)
        if table is None:
            raise NotFoundError("Table", table_id)
        return table

    def create(self, data: Mapping[str, Any]) -> Table:
        _run_guards(guards.CREATE_GUARDS, data)

        new_table = Table(
            table_name=data["table_name"],
            capacity=data["capacity"],
            reservation_id=data.get("reservation_id") or None,
        )
        table = self.store.create_table(new_table)
        logger.info("Mesa %s creada (%s, capacidad %s)", table.table_id, table.table_name, table.capacity)
        return table

    # ==================================================================
    # TRANSICIONES
    # ==================================================================

    def seat_reservation(self, table_id: int, data: Mapping[str, Any]) -> Tuple[Table, Reservation]:
        """Sienta la reserva `data["reservation_id"]` en la mesa `table_id`."""
        _run_guards(guards.SEAT_BODY_GUARDS, data)
        reservation_id = data["reservation_id"]

        reservation = self.store.read_reservation(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation", reservation_id)
        table = self.read(table_id)

        _run_guards(self.seat_guards, table, reservation)

        self.store.apply_seating(table, reservation)
        logger.info("Reserva %s sentada en la mesa %s", reservation_id, table_id)
        return table, reservation

    def finish_reservation(self, table_id: int) -> Tuple[Table, Reservation]:
        """Libera la mesa y da por terminada la reserva que la ocupaba."""
        table = self.read(table_id)

        # Una mesa libre no referencia reserva: se reporta como no ocupada
        reservation = None
        if table.reservation_id is not None:
            reservation = self.store.read_reservation(table.reservation_id)
            if reservation is None:
                raise NotFoundError("Reservation", table.reservation_id)

        _run_guards((guards.check_if_not_occupied,), table)

        reservation_id = reservation.reservation_id
        self.store.apply_finish(table, reservation)
        logger.info("Mesa %s liberada, reserva %s terminada", table_id, reservation_id)
        return table, reservation


def _run_guards(checks: Iterable, *args) -> None:
    for check in checks:
        error: Optional[TableServiceError] = check(*args)
        if error is not None:
            logger.warning("%s rechazó la operación: %s", check.__name__, error.message)
            raise error

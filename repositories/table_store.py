import logging
from datetime import datetime, timezone
from typing import List, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from core.errors import PersistenceError
from models.reservations import Reservation, ReservationStatus
from models.tables import Table

logger = logging.getLogger(__name__)


class TableStore(Protocol):
    """Acceso a mesas y reservas que necesita el servicio de asignación."""

    def list_tables(self) -> List[Table]: ...

    def read_table(self, table_id: int) -> Optional[Table]: ...

    def create_table(self, table: Table) -> Table: ...

    def read_reservation(self, reservation_id: int) -> Optional[Reservation]: ...

    def apply_seating(self, table: Table, reservation: Reservation) -> None:
        """Ocupa la mesa con la reserva y la marca "seated", todo o nada."""
        ...

    def apply_finish(self, table: Table, reservation: Reservation) -> None:
        """Libera la mesa y marca la reserva "finished", todo o nada."""
        ...


class SqlTableStore:
    """Implementación de TableStore sobre una sesión de SQLModel."""

    def __init__(self, session: Session):
        self.session = session

    def list_tables(self) -> List[Table]:
        return list(self.session.exec(select(Table).order_by(Table.table_name)).all())

    def read_table(self, table_id: int) -> Optional[Table]:
        return self.session.get(Table, table_id)

    def create_table(self, table: Table) -> Table:
        try:
            self.session.add(table)
            self.session.commit()
            self.session.refresh(table)
            return table
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Error al crear la mesa %s", table.table_name)
            raise PersistenceError(f"Table could not be created: {e}") from e

    def read_reservation(self, reservation_id: int) -> Optional[Reservation]:
        return self.session.get(Reservation, reservation_id)

    def apply_seating(self, table: Table, reservation: Reservation) -> None:
        self._apply_transition(
            table, reservation,
            reservation_id=reservation.reservation_id,
            status=ReservationStatus.SEATED,
        )

    def apply_finish(self, table: Table, reservation: Reservation) -> None:
        self._apply_transition(
            table, reservation,
            reservation_id=None,
            status=ReservationStatus.FINISHED,
        )

    def _apply_transition(
        self,
        table: Table,
        reservation: Reservation,
        reservation_id: Optional[int],
        status: ReservationStatus,
    ) -> None:
        # Mesa y reserva se escriben en la misma transacción
        table_id, res_id = table.table_id, reservation.reservation_id
        now = datetime.now(timezone.utc)
        try:
            table.reservation_id = reservation_id
            table.updated_at = now
            reservation.status = status.value
            reservation.updated_at = now

            self.session.add(table)
            self.session.add(reservation)
            self.session.commit()
            self.session.refresh(table)
            self.session.refresh(reservation)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(
                "Escritura parcial revertida: mesa %s / reserva %s -> %s",
                table_id, res_id, status.value,
            )
            raise PersistenceError(
                f"Table {table_id} and reservation {res_id} "
                f"could not be updated together; no changes were applied."
            ) from e

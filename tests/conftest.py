from datetime import date, time
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, create_engine
from sqlmodel.pool import StaticPool

from app.main import app
from core.database import create_db_and_tables, get_session
from models.reservations import Reservation, ReservationStatus
from models.tables import Table
from services.table_assignment import TableAssignmentService


class InMemoryTableStore:
    """TableStore en memoria para probar el servicio sin base de datos."""

    def __init__(self):
        self.tables: Dict[int, Table] = {}
        self.reservations: Dict[int, Reservation] = {}
        self.seatings = 0
        self.finishes = 0

    def add_reservation(self, reservation_id: int, people: int, status: str = ReservationStatus.BOOKED.value) -> Reservation:
        reservation = Reservation(
            reservation_id=reservation_id,
            first_name="Ana",
            last_name="Rojas",
            mobile_number="555-0101",
            reservation_date=date(2026, 10, 20),
            reservation_time=time(19, 30),
            people=people,
            status=status,
        )
        self.reservations[reservation_id] = reservation
        return reservation

    def list_tables(self) -> List[Table]:
        return sorted(self.tables.values(), key=lambda table: table.table_name)

    def read_table(self, table_id: int) -> Optional[Table]:
        return self.tables.get(table_id)

    def create_table(self, table: Table) -> Table:
        table.table_id = len(self.tables) + 1
        self.tables[table.table_id] = table
        return table

    def read_reservation(self, reservation_id: int) -> Optional[Reservation]:
        return self.reservations.get(reservation_id)

    def apply_seating(self, table: Table, reservation: Reservation) -> None:
        self.seatings += 1
        table.reservation_id = reservation.reservation_id
        reservation.status = ReservationStatus.SEATED.value

    def apply_finish(self, table: Table, reservation: Reservation) -> None:
        self.finishes += 1
        table.reservation_id = None
        reservation.status = ReservationStatus.FINISHED.value


@pytest.fixture
def store():
    return InMemoryTableStore()


@pytest.fixture
def service(store):
    return TableAssignmentService(store, reject_finished=False)


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()


def build_reservation_payload(people: int = 4, **overrides) -> dict:
    data = {
        "first_name": "Ana",
        "last_name": "Rojas",
        "mobile_number": "555-0101",
        "reservation_date": "2026-10-20",
        "reservation_time": "19:30:00",
        "people": people,
    }
    data.update(overrides)
    return {"data": data}


@pytest.fixture
def reservation_payload():
    return build_reservation_payload


@pytest.fixture
def make_reservation(client):
    def _make(people: int = 4, **overrides) -> dict:
        response = client.post("/api/reservations", json=build_reservation_payload(people, **overrides))
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make


@pytest.fixture
def make_table(client):
    def _make(table_name: str = "Bar #1", capacity: int = 4) -> dict:
        response = client.post(
            "/api/tables",
            json={"data": {"table_name": table_name, "capacity": capacity}},
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make

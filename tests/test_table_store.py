from datetime import date, time, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from core.errors import PersistenceError
from models.reservations import Reservation
from models.tables import Table
from repositories.table_store import SqlTableStore


@pytest.fixture
def seeded(session):
    reservation = Reservation(
        first_name="Ana",
        last_name="Rojas",
        mobile_number="555-0101",
        reservation_date=date(2026, 10, 20),
        reservation_time=time(19, 30),
        people=2,
    )
    table = Table(table_name="Bar #1", capacity=4)
    session.add(reservation)
    session.add(table)
    session.commit()
    session.refresh(reservation)
    session.refresh(table)
    return table, reservation


def test_apply_seating_writes_both_rows(session, seeded):
    table, reservation = seeded
    store = SqlTableStore(session)

    store.apply_seating(table, reservation)

    assert store.read_table(table.table_id).reservation_id == reservation.reservation_id
    assert store.read_reservation(reservation.reservation_id).status == "seated"


def test_failed_commit_leaves_table_and_reservation_untouched(session, seeded, monkeypatch):
    table, reservation = seeded
    table_id, reservation_id = table.table_id, reservation.reservation_id
    store = SqlTableStore(session)

    def failing_commit():
        raise OperationalError("UPDATE reservations", {}, Exception("database is locked"))

    monkeypatch.setattr(session, "commit", failing_commit)

    with pytest.raises(PersistenceError) as exc_info:
        store.apply_seating(table, reservation)

    assert exc_info.value.status_code == 500
    assert store.read_table(table_id).reservation_id is None
    assert store.read_reservation(reservation_id).status == "booked"


def test_new_rows_carry_timezone_aware_timestamps():
    table = Table(table_name="Bar #1", capacity=4)

    assert table.created_at.tzinfo is not None
    assert table.updated_at.utcoffset() == timedelta(0)

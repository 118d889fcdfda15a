def test_create_reservation_starts_booked(client, reservation_payload):
    response = client.post("/api/reservations", json=reservation_payload(people=3))

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "booked"
    assert data["people"] == 3
    assert data["reservation_time"] == "19:30:00"


def test_create_reservation_rejects_empty_party(client, reservation_payload):
    response = client.post("/api/reservations", json=reservation_payload(people=0))

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert "people" in body["message"]


def test_list_reservations_by_date(client, make_reservation):
    make_reservation(reservation_date="2026-10-20")
    make_reservation(reservation_date="2026-10-21")

    response = client.get("/api/reservations", params={"date": "2026-10-21"})

    assert response.status_code == 200
    assert [r["reservation_date"] for r in response.json()["data"]] == ["2026-10-21"]


def test_read_reservation_not_found(client):
    response = client.get("/api/reservations/12")

    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Reservation 12 cannot be found."}

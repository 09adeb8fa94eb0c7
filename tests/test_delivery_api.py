"""Neighborhood and distance-zone pricing API tests."""

from decimal import Decimal
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from backoffice.core.security import get_password_hash
from backoffice.db import session as db_session
from backoffice.db.base import Base
from backoffice.main import app
from backoffice.services.user_service import create_user


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def _setup_db(tmp_path: Path, monkeypatch):
    engine = _build_test_engine(tmp_path / "test_delivery.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    with testing_session_local() as db:
        create_user(db, email="admin@example.com", hashed_password=get_password_hash("secret123"))
    return testing_session_local


def _auth_headers(client: TestClient) -> dict[str, str]:
    response = client.post("/api/v1/auth/login", json={"email": "admin@example.com", "password": "secret123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def test_neighborhoods_reject_duplicate_names(tmp_path: Path, monkeypatch) -> None:
    _setup_db(tmp_path, monkeypatch)

    with TestClient(app) as client:
        headers = _auth_headers(client)
        centro = client.post("/api/v1/delivery/neighborhoods", json={"name": "Centro", "delivery_fee": "5.00"}, headers=headers)
        client.post("/api/v1/delivery/neighborhoods", json={"name": "Aeroporto", "delivery_fee": "9.50"}, headers=headers)
        duplicate = client.post(
            "/api/v1/delivery/neighborhoods",
            json={"name": "  centro ", "delivery_fee": "6.00"},
            headers=headers,
        )
        rename_clash = client.patch(
            f"/api/v1/delivery/neighborhoods/{centro.json()['id']}",
            json={"name": "AEROPORTO"},
            headers=headers,
        )
        fee_change = client.patch(
            f"/api/v1/delivery/neighborhoods/{centro.json()['id']}",
            json={"delivery_fee": "7.00"},
            headers=headers,
        )
        negative = client.post("/api/v1/delivery/neighborhoods", json={"name": "Sul", "delivery_fee": "-1"}, headers=headers)
        listing = client.get("/api/v1/delivery/neighborhoods", headers=headers)

    assert centro.status_code == 201
    assert duplicate.status_code == 409
    assert rename_clash.status_code == 409
    assert Decimal(fee_change.json()["delivery_fee"]) == Decimal("7.00")
    assert negative.status_code == 422
    assert [row["name"] for row in listing.json()] == ["Aeroporto", "Centro"]


def test_zone_validation_and_quote(tmp_path: Path, monkeypatch) -> None:
    _setup_db(tmp_path, monkeypatch)

    with TestClient(app) as client:
        headers = _auth_headers(client)
        client.post("/api/v1/delivery/neighborhoods", json={"name": "Centro", "delivery_fee": "5.00"}, headers=headers)
        near = client.post(
            "/api/v1/delivery/zones",
            json={"min_distance": "0", "max_distance": "3", "delivery_fee": "4.00"},
            headers=headers,
        )
        client.post(
            "/api/v1/delivery/zones",
            json={"min_distance": "3", "max_distance": "8", "delivery_fee": "8.00"},
            headers=headers,
        )
        inverted = client.post(
            "/api/v1/delivery/zones",
            json={"min_distance": "5", "max_distance": "5", "delivery_fee": "1.00"},
            headers=headers,
        )
        by_bairro = client.get("/api/v1/delivery/quote", params={"bairro": "centro", "distance": "1"}, headers=headers)
        by_zone = client.get("/api/v1/delivery/quote", params={"bairro": "Longe", "distance": "3"}, headers=headers)
        out_of_range = client.get("/api/v1/delivery/quote", params={"distance": "12"}, headers=headers)

    assert near.status_code == 201
    assert inverted.status_code == 422
    assert by_bairro.json()["source"] == "neighborhood"
    assert Decimal(by_bairro.json()["delivery_fee"]) == Decimal("5.00")
    assert by_zone.json()["source"] == "zone"
    assert Decimal(by_zone.json()["delivery_fee"]) == Decimal("8.00")
    assert out_of_range.json() == {"delivery_fee": None, "source": None}


def test_zone_update_and_delete(tmp_path: Path, monkeypatch) -> None:
    _setup_db(tmp_path, monkeypatch)

    with TestClient(app) as client:
        headers = _auth_headers(client)
        zone = client.post(
            "/api/v1/delivery/zones",
            json={"min_distance": "0", "max_distance": "3", "delivery_fee": "4.00"},
            headers=headers,
        ).json()
        updated = client.put(
            f"/api/v1/delivery/zones/{zone['id']}",
            json={"min_distance": "0", "max_distance": "5", "delivery_fee": "6.00"},
            headers=headers,
        )
        deleted = client.delete(f"/api/v1/delivery/zones/{zone['id']}", headers=headers)
        missing = client.put(
            f"/api/v1/delivery/zones/{zone['id']}",
            json={"min_distance": "0", "max_distance": "5", "delivery_fee": "6.00"},
            headers=headers,
        )

    assert Decimal(updated.json()["max_distance"]) == Decimal("5")
    assert deleted.status_code == 204
    assert missing.status_code == 404

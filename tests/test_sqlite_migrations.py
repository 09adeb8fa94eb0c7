"""Tests for lightweight SQLite schema migrations."""

from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from backoffice.core.security import get_password_hash
from backoffice.db import session as db_session
from backoffice.db.migrations import ensure_sqlite_schema
from backoffice.main import app
from backoffice.services.user_service import create_user


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def _create_legacy_tables(engine: Engine) -> None:
    with engine.begin() as connection:
        connection.execute(
            text(
                """
                CREATE TABLE menu_items (
                    id INTEGER NOT NULL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL,
                    description TEXT,
                    price NUMERIC(10, 2) NOT NULL,
                    is_available BOOLEAN NOT NULL,
                    category_id INTEGER
                )
                """
            )
        )
        connection.execute(
            text(
                """
                CREATE TABLE business_hours (
                    id INTEGER NOT NULL PRIMARY KEY,
                    weekday INTEGER NOT NULL UNIQUE,
                    open_time VARCHAR(5) NOT NULL,
                    close_time VARCHAR(5) NOT NULL,
                    is_open BOOLEAN NOT NULL
                )
                """
            )
        )
        connection.execute(
            text(
                """
                CREATE TABLE orders (
                    id INTEGER NOT NULL PRIMARY KEY,
                    customer_name VARCHAR(255),
                    customer_phone VARCHAR(64),
                    items JSON NOT NULL,
                    order_amount NUMERIC(10, 2),
                    delivery_fee NUMERIC(10, 2),
                    total_amount NUMERIC(10, 2),
                    status VARCHAR(32) NOT NULL,
                    created_at DATETIME NOT NULL,
                    delivery_address JSON
                )
                """
            )
        )
        connection.execute(
            text(
                "INSERT INTO menu_items (id, name, price, is_available) VALUES "
                "(3, 'Pizza', 30, 1), (7, 'Suco', 8, 1)"
            )
        )
        connection.execute(
            text(
                "INSERT INTO business_hours (id, weekday, open_time, close_time, is_open) VALUES "
                "(1, 5, '08:00', '18:00', 1), (2, 1, '08:00', '18:00', 1)"
            )
        )


def _columns(engine: Engine, table_name: str) -> set[str]:
    with engine.connect() as connection:
        rows = connection.execute(text(f"PRAGMA table_info({table_name})")).mappings().all()
    return {row["name"] for row in rows}


def test_legacy_tables_gain_display_order_backfilled(tmp_path: Path) -> None:
    engine = _build_test_engine(tmp_path / "legacy.db")
    _create_legacy_tables(engine)

    ensure_sqlite_schema(engine)

    assert "display_order" in _columns(engine, "menu_items")
    assert {"bairro", "scheduled_date"} <= _columns(engine, "orders")
    with engine.connect() as connection:
        item_orders = connection.execute(text("SELECT id, display_order FROM menu_items ORDER BY id")).all()
        hour_orders = connection.execute(text("SELECT weekday, display_order FROM business_hours ORDER BY id")).all()
    assert [tuple(row) for row in item_orders] == [(3, 3), (7, 7)]
    assert [tuple(row) for row in hour_orders] == [(5, 5), (1, 1)]


def test_migration_is_idempotent(tmp_path: Path) -> None:
    engine = _build_test_engine(tmp_path / "legacy_twice.db")
    _create_legacy_tables(engine)

    ensure_sqlite_schema(engine)
    ensure_sqlite_schema(engine)

    assert "display_order" in _columns(engine, "business_hours")


def test_startup_upgrades_legacy_database_and_moves_work(tmp_path: Path, monkeypatch) -> None:
    engine = _build_test_engine(tmp_path / "legacy_app.db")
    _create_legacy_tables(engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)

    with TestClient(app) as client:
        with testing_session_local() as db:
            create_user(db, email="admin@example.com", hashed_password=get_password_hash("secret123"))
        token = client.post(
            "/api/v1/auth/login", json={"email": "admin@example.com", "password": "secret123"}
        ).json()["access_token"]
        headers = {"Authorization": f"Bearer {token}"}
        moved = client.post("/api/v1/menu/items/7/move", json={"direction": "up"}, headers=headers)

    assert moved.status_code == 200
    assert [(item["id"], item["display_order"]) for item in moved.json()["items"]] == [(7, 3), (3, 7)]

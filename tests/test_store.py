"""DataStore write failures against a real SQLite database."""

import sqlite3
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from backoffice.db.base import Base
from backoffice.models.menu import MenuItem
from backoffice.services.notifications import Notifier
from backoffice.services.sequencer import move_item
from backoffice.services.store import DataStore, StoreWriteError


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def _fail_nth_statement(engine: Engine, prefix: str, failing_call: int) -> list[str]:
    """Raise a driver-level OperationalError on the n-th statement starting with prefix."""
    seen: list[str] = []

    @event.listens_for(engine, "before_cursor_execute")
    def _maybe_fail(conn, cursor, statement, parameters, context, executemany):
        if not statement.startswith(prefix):
            return
        seen.append(statement)
        if len(seen) == failing_call:
            raise OperationalError(statement, parameters, sqlite3.OperationalError("database is locked"))

    return seen


@pytest.fixture()
def session_factory(tmp_path: Path):
    engine = _build_test_engine(tmp_path / "test_store.db")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with factory() as db:
        for item_id, (name, order) in enumerate((("Pizza", 5), ("Suco", 10), ("Bolo", 20)), start=1):
            db.add(MenuItem(id=item_id, name=name, price=Decimal("10.00"), display_order=order))
        db.commit()
    yield factory
    engine.dispose()


def test_update_failure_rolls_back_and_raises_store_write_error(session_factory) -> None:
    engine = session_factory.kw["bind"]
    _fail_nth_statement(engine, "UPDATE menu_items", 1)

    with session_factory() as db:
        store = DataStore(db)
        with pytest.raises(StoreWriteError) as excinfo:
            store.update(MenuItem, 1, {"display_order": 99})

        assert isinstance(excinfo.value.__cause__, OperationalError)
        assert db.get(MenuItem, 1).display_order == 5
        assert store.update(MenuItem, 1, {"name": "Pizza grande"}).name == "Pizza grande"


def test_insert_failure_raises_store_write_error(session_factory) -> None:
    engine = session_factory.kw["bind"]
    _fail_nth_statement(engine, "INSERT INTO menu_items", 1)

    with session_factory() as db:
        with pytest.raises(StoreWriteError):
            DataStore(db).insert(MenuItem, {"name": "Pastel", "price": Decimal("7.50")})

        assert [item.name for item in DataStore(db).select(MenuItem, order_by=(MenuItem.id,))] == ["Pizza", "Suco", "Bolo"]


def test_move_with_failing_second_update_keeps_first_write(session_factory) -> None:
    engine = session_factory.kw["bind"]
    updates = _fail_nth_statement(engine, "UPDATE menu_items", 2)
    notifier = Notifier()

    with session_factory() as db:
        store = DataStore(db)
        records = store.select(MenuItem, order_by=(MenuItem.display_order, MenuItem.id))
        result = move_item(store, MenuItem, records, 2, "up", notifier)

    assert result.failed
    assert len(updates) == 2
    assert [message.variant for message in notifier.messages] == ["destructive"]
    with session_factory() as db:
        rows = db.query(MenuItem.id, MenuItem.display_order).order_by(MenuItem.id).all()
    assert [tuple(row) for row in rows] == [(1, 5), (2, 5), (3, 20)]

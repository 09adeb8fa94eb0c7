"""Lightweight schema migrations for SQLite databases."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)

# Tables created before manual re-ordering existed, with the backfill expression per table.
ORDERED_TABLES: dict[str, str] = {
    "menu_categories": "id",
    "menu_items": "id",
    "business_hours": "weekday",
}


def _sqlite_column_names(connection: Connection, table_name: str) -> set[str]:
    """Return column names for a SQLite table using PRAGMA table_info."""
    rows = connection.execute(text(f"PRAGMA table_info({table_name});")).mappings().all()
    return {str(row["name"]) for row in rows}


def _ensure_display_order_column(connection: Connection, table_name: str, backfill_column: str) -> bool:
    """Add display_order to a legacy table and seed it from a stable column."""
    if "display_order" in _sqlite_column_names(connection, table_name):
        return False
    connection.execute(text(f"ALTER TABLE {table_name} ADD COLUMN display_order INTEGER NOT NULL DEFAULT 0"))
    connection.execute(text(f"UPDATE {table_name} SET display_order = {backfill_column}"))
    return True


def ensure_sqlite_schema(engine: Engine) -> None:
    """Apply lightweight schema updates for legacy SQLite databases."""
    if engine.dialect.name != "sqlite":
        return

    with engine.begin() as connection:
        table_rows = connection.execute(text("SELECT name FROM sqlite_master WHERE type='table';")).all()
        table_names: set[str] = {str(row[0]) for row in table_rows}

        for table_name, backfill_column in ORDERED_TABLES.items():
            if table_name not in table_names:
                continue
            if _ensure_display_order_column(connection, table_name, backfill_column):
                logger.info("[MIGRATION] Added display_order to %s (backfilled from %s).", table_name, backfill_column)

        if "customers" in table_names and "last_order_date" not in _sqlite_column_names(connection, "customers"):
            connection.execute(text("ALTER TABLE customers ADD COLUMN last_order_date DATETIME"))
            logger.info("[MIGRATION] Added last_order_date to customers.")

        if "orders" in table_names:
            order_columns = _sqlite_column_names(connection, "orders")
            if "bairro" not in order_columns:
                connection.execute(text("ALTER TABLE orders ADD COLUMN bairro VARCHAR(255)"))
                logger.info("[MIGRATION] Added bairro to orders.")
            if "scheduled_date" not in order_columns:
                connection.execute(text("ALTER TABLE orders ADD COLUMN scheduled_date DATE"))
                logger.info("[MIGRATION] Added scheduled_date to orders.")

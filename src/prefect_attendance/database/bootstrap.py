"""Schema/store initializer.

Safe to run on every start: every statement is conditional on absence and
nothing is ever altered or dropped.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterable

from ..core.exceptions import StorageError
from .connection import DBConfig, resolve_db_path

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS members (
        id TEXT PRIMARY KEY,
        name TEXT,
        role TEXT NOT NULL,
        prefect_number TEXT UNIQUE NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS attendance (
        id TEXT PRIMARY KEY,
        member_id TEXT NOT NULL,
        date TEXT NOT NULL,
        timestamp TEXT NOT NULL,
        status TEXT NOT NULL,
        FOREIGN KEY(member_id) REFERENCES members(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS backups (
        id TEXT PRIMARY KEY,
        created_at TEXT NOT NULL,
        path TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS settings (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL
    )
    """,
)

UNIQUE_DAILY_INDEX = (
    "CREATE UNIQUE INDEX IF NOT EXISTS ux_attendance_member_date "
    "ON attendance(member_id, date)"
)


def _exec_all(conn: sqlite3.Connection, statements: Iterable[str]) -> None:
    for stmt in statements:
        conn.execute(stmt)


def _ensure_daily_index(conn: sqlite3.Connection, db_path: Path) -> bool:
    try:
        conn.execute(UNIQUE_DAILY_INDEX)
        return True
    except sqlite3.IntegrityError:
        # Older stores may already hold duplicate (member_id, date) rows.
        logger.warning(
            "Store %s has duplicate daily attendance rows; unique index not created", db_path
        )
        return False


def init_store(config: DBConfig) -> Path:
    """Ensure the store file and its tables exist. Returns the store path."""
    db_path = resolve_db_path(config)
    try:
        conn = sqlite3.connect(str(db_path), timeout=config.timeout)
    except sqlite3.Error as e:
        raise StorageError(f"Cannot open store {db_path}: {e}") from e

    try:
        conn.execute("PRAGMA journal_mode = WAL")
        _exec_all(conn, SCHEMA_STATEMENTS)
        _ensure_daily_index(conn, db_path)
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        raise StorageError(f"Cannot initialize store {db_path}: {e}") from e
    finally:
        conn.close()

    logger.info("Store ready at %s", db_path)
    return db_path


def list_tables(config: DBConfig) -> list[str]:
    db_path = resolve_db_path(config)
    conn = sqlite3.connect(str(db_path), timeout=config.timeout)
    try:
        cur = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
        )
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def list_indexes(config: DBConfig, table: str) -> list[str]:
    db_path = resolve_db_path(config)
    conn = sqlite3.connect(str(db_path), timeout=config.timeout)
    try:
        cur = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='index' AND tbl_name=? ORDER BY name",
            (table,),
        )
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

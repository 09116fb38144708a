from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_JOINED_SELECT = """
    SELECT a.id, a.member_id, a.date, a.timestamp, a.status, m.prefect_number, m.role
    FROM attendance a
    JOIN members m ON a.member_id = m.id
"""


def _to_record(row: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=row["id"],
        member_id=row["member_id"],
        date=row["date"],
        timestamp=row["timestamp"],
        status=row["status"],
        prefect_number=row.get("prefect_number"),
        role=row.get("role"),
    )


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_member_and_date(self, member_id: str, work_date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.member_id, a.date, a.timestamp, a.status, m.prefect_number, m.role
                FROM attendance a
                LEFT JOIN members m ON a.member_id = m.id
                WHERE a.member_id=? AND a.date=?
                """,
                (member_id, work_date),
            )
            row = fetchone(cur)
            return _to_record(row) if row else None

    def create(
        self,
        *,
        record_id: str,
        member_id: str,
        work_date: str,
        timestamp: str,
        status: str,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(id, member_id, date, timestamp, status)
                VALUES(?,?,?,?,?)
                """,
                (record_id, member_id, work_date, timestamp, status),
            )

    def list_by_date(self, work_date: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_JOINED_SELECT + " WHERE a.date=?", (work_date,))
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_JOINED_SELECT)
            return [_to_record(r) for r in fetchall(cur)]

    def search_by_prefect_number(self, fragment: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _JOINED_SELECT
                + " WHERE lower(m.prefect_number) LIKE ? ESCAPE '\\' ORDER BY a.timestamp DESC",
                (_like_pattern(fragment),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance")
            return cur.rowcount


def _like_pattern(fragment: str) -> str:
    escaped = fragment.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"

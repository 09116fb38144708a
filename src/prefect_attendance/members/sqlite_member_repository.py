from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository

_UPDATABLE = {
    "prefect_number": "UPDATE members SET prefect_number=? WHERE id=?",
    "role": "UPDATE members SET role=? WHERE id=?",
    "name": "UPDATE members SET name=? WHERE id=?",
}


def _to_member(row: Dict[str, Any]) -> Member:
    return Member(
        id=row["id"],
        name=row.get("name"),
        role=row["role"],
        prefect_number=row["prefect_number"],
    )


class SQLiteMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, role, prefect_number FROM members WHERE id=?",
                (member_id,),
            )
            row = fetchone(cur)
            return _to_member(row) if row else None

    def get_by_prefect_number(self, prefect_number: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, role, prefect_number FROM members WHERE prefect_number=?",
                (prefect_number,),
            )
            row = fetchone(cur)
            return _to_member(row) if row else None

    def insert_if_absent(self, *, member_id: str, prefect_number: str, role: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT OR IGNORE INTO members(id, role, prefect_number) VALUES(?,?,?)",
                (member_id, role, prefect_number),
            )
            return cur.rowcount > 0

    def create(self, *, member_id: str, prefect_number: str, role: str, name: Optional[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO members(id, prefect_number, role, name) VALUES(?,?,?,?)",
                (member_id, prefect_number, role, name),
            )

    def update_fields(self, member_id: str, changes: Mapping[str, Optional[str]]) -> bool:
        unknown = set(changes) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"Unsupported member fields: {', '.join(sorted(unknown))}")
        matched = False
        with db_cursor(self._conn_factory) as (_, cur):
            for field, value in changes.items():
                cur.execute(_UPDATABLE[field], (value, member_id))
                matched = matched or cur.rowcount > 0
        return matched

    def delete_by_id(self, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE id=?", (member_id,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, role, prefect_number FROM members")
            return [_to_member(r) for r in fetchall(cur)]

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members")
            return cur.rowcount

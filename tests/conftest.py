from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

import pytest

from prefect_attendance.attendance.model import AttendanceRecord
from prefect_attendance.container import build_container
from prefect_attendance.core.exceptions import ConflictError
from prefect_attendance.database.bootstrap import init_store
from prefect_attendance.database.connection import DBConfig
from prefect_attendance.members.model import Member


class InMemoryMembers:
    def __init__(self):
        self.by_id: dict[str, Member] = {}

    def get_by_id(self, member_id: str) -> Optional[Member]:
        return self.by_id.get(member_id)

    def get_by_prefect_number(self, prefect_number: str) -> Optional[Member]:
        for m in self.by_id.values():
            if m.prefect_number == prefect_number:
                return m
        return None

    def insert_if_absent(self, *, member_id: str, prefect_number: str, role: str) -> bool:
        if self.get_by_prefect_number(prefect_number):
            return False
        self.by_id[member_id] = Member(id=member_id, role=role, prefect_number=prefect_number)
        return True

    def create(self, *, member_id: str, prefect_number: str, role: str, name=None) -> None:
        if self.get_by_prefect_number(prefect_number):
            raise ConflictError("UNIQUE constraint failed: members.prefect_number")
        self.by_id[member_id] = Member(id=member_id, role=role, prefect_number=prefect_number, name=name)

    def list_all(self) -> Sequence[Member]:
        return list(self.by_id.values())

    def delete_all(self) -> int:
        count = len(self.by_id)
        self.by_id.clear()
        return count


class InMemoryAttendance:
    def __init__(self, members: InMemoryMembers):
        self._members = members
        self.rows: list[AttendanceRecord] = []

    def _joined(self, r: AttendanceRecord) -> AttendanceRecord:
        m = self._members.get_by_id(r.member_id)
        return AttendanceRecord(
            id=r.id,
            member_id=r.member_id,
            date=r.date,
            timestamp=r.timestamp,
            status=r.status,
            prefect_number=m.prefect_number if m else None,
            role=m.role if m else None,
        )

    def get_for_member_and_date(self, member_id: str, work_date: str) -> Optional[AttendanceRecord]:
        for r in self.rows:
            if r.member_id == member_id and r.date == work_date:
                return self._joined(r)
        return None

    def create(self, *, record_id: str, member_id: str, work_date: str, timestamp: str, status: str) -> None:
        if any(r.member_id == member_id and r.date == work_date for r in self.rows):
            raise ConflictError("UNIQUE constraint failed: attendance.member_id, attendance.date")
        self.rows.append(
            AttendanceRecord(id=record_id, member_id=member_id, date=work_date, timestamp=timestamp, status=status)
        )

    def list_by_date(self, work_date: str) -> Sequence[AttendanceRecord]:
        return [self._joined(r) for r in self.rows if r.date == work_date]

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [self._joined(r) for r in self.rows]

    def search_by_prefect_number(self, fragment: str) -> Sequence[AttendanceRecord]:
        found = [self._joined(r) for r in self.rows]
        found = [r for r in found if r.prefect_number and fragment.lower() in r.prefect_number.lower()]
        return sorted(found, key=lambda r: r.timestamp, reverse=True)

    def delete_all(self) -> int:
        count = len(self.rows)
        self.rows.clear()
        return count


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 6, 30, 0)


@pytest.fixture
def db_config(tmp_path) -> DBConfig:
    config = DBConfig(data_dir=tmp_path / "appdata")
    init_store(config)
    return config


@pytest.fixture
def settings(tmp_path) -> dict:
    return {
        "DATA_DIR": str(tmp_path / "appdata"),
        "DB_FILE_NAME": "attendance.db",
        "DB_TIMEOUT": 1.0,
        "LATE_CUTOFF": "07:00",
        "APP_VERSION": "1.2.3",
        "QR_SECRET": "test-secret",
        "TESTING": True,
        "LOG_LEVEL": "WARNING",
    }


@pytest.fixture
def container(settings, db_config):
    return build_container(settings=settings)

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_member_and_date(self, member_id: str, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        record_id: str,
        member_id: str,
        work_date: str,
        timestamp: str,
        status: str,
    ) -> None:
        """Insert one record; raises ConflictError when the day is already taken."""

        raise NotImplementedError

    def list_by_date(self, work_date: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def search_by_prefect_number(self, fragment: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import format_date, format_timestamp, now_local
from ..common.validators import require_non_empty
from ..core.exceptions import ConflictError, DuplicateAttendanceError
from ..members.repository import MemberRepository
from ..members.service import MemberService, new_id
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        member_service: MemberService,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Callable[[], str] = new_id,
    ):
        self._attendance = attendance
        self._members = members
        self._member_service = member_service
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._clock = clock
        self._new_id = id_factory

    def _now(self) -> datetime:
        return (self._clock or now_local)()

    def mark_attendance(self, prefect_number: str, role: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        prefect_number = require_non_empty(prefect_number, "Prefect number")
        role = require_non_empty(role, "Role")
        resolution = self._member_service.resolve_or_create(prefect_number, role)

        now = now or self._now()
        today = format_date(now.date())

        if self._attendance.get_for_member_and_date(resolution.member_id, today):
            logger.info("Duplicate attendance for %s on %s", prefect_number, today)
            raise DuplicateAttendanceError(prefect_number, today)

        decision = self._factory.for_mark(now=now).decide(now=now, cutoff=self._factory.cutoff)
        record = AttendanceRecord(
            id=self._new_id(),
            member_id=resolution.member_id,
            date=today,
            timestamp=format_timestamp(now),
            status=decision.status.value,
            prefect_number=prefect_number,
            role=role,
        )

        try:
            self._attendance.create(
                record_id=record.id,
                member_id=record.member_id,
                work_date=record.date,
                timestamp=record.timestamp,
                status=record.status,
            )
        except ConflictError as e:
            # Lost the race against a concurrent mark for the same day.
            logger.info("Duplicate attendance for %s on %s", prefect_number, today)
            raise DuplicateAttendanceError(prefect_number, today) from e

        logger.info(
            "Marked %s for %s (%s) on %s",
            record.status,
            prefect_number,
            "new member" if resolution.created else "existing member",
            today,
        )
        return record

    def list_by_date(self, work_date: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_date(work_date)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def search_by_prefect_number(self, fragment: str) -> Sequence[AttendanceRecord]:
        fragment = (fragment or "").strip()
        if not fragment:
            return []
        return self._attendance.search_by_prefect_number(fragment)

    def today(self) -> str:
        return format_date(self._now().date())

    def wipe_all_data(self) -> None:
        records = self._attendance.delete_all()
        members = self._members.delete_all()
        logger.warning("Wiped all data (%d attendance rows, %d members)", records, members)

from __future__ import annotations

import csv
import io
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..attendance.strategies.late_strategy import late_note
from ..common.datetime_utils import format_timestamp, now_local, parse_iso_date
from ..core.constants import DEFAULT_LATE_CUTOFF, DEFAULT_RECENT_RECORDS
from ..core.enums import AttendanceStatus

MEMBER_REPORT_FIELDS = ["date", "role", "time", "status", "note"]
DAILY_REPORT_FIELDS = ["prefect_number", "role", "time", "status", "note"]


@dataclass(frozen=True)
class DailyStats:
    date: str
    total: int
    present: int
    late: int
    by_role: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class MemberStats:
    prefect_number: str
    total_days: int
    present_days: int
    late_days: int
    attendance_rate: float
    by_role: dict[str, int] = field(default_factory=dict)
    recent_records: list[AttendanceRecord] = field(default_factory=list)


def _count_statuses(records: Sequence[AttendanceRecord]) -> tuple[int, int]:
    statuses = Counter(r.status for r in records)
    return statuses[AttendanceStatus.PRESENT.value], statuses[AttendanceStatus.LATE.value]


def _role_counts(records: Sequence[AttendanceRecord]) -> dict[str, int]:
    return dict(Counter(r.role or "-" for r in records))


class AttendanceReportService:
    """Read-only statistics and exports over recorded attendance."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        cutoff: time = DEFAULT_LATE_CUTOFF,
        recent_limit: int = DEFAULT_RECENT_RECORDS,
    ):
        self._attendance = attendance
        self._cutoff = cutoff
        self._recent_limit = int(recent_limit)

    def daily_stats(self, work_date: str) -> DailyStats:
        records = self._attendance.list_by_date(work_date)
        present, late = _count_statuses(records)
        return DailyStats(
            date=work_date,
            total=len(records),
            present=present,
            late=late,
            by_role=_role_counts(records),
        )

    def _member_records(self, prefect_number: str) -> list[AttendanceRecord]:
        # Search is a substring match; a report is for one exact badge.
        records = self._attendance.search_by_prefect_number(prefect_number)
        return [r for r in records if r.prefect_number == prefect_number]

    def member_stats(self, prefect_number: str) -> MemberStats:
        records = self._member_records(prefect_number)
        present, late = _count_statuses(records)
        total = len(records)
        return MemberStats(
            prefect_number=prefect_number,
            total_days=total,
            present_days=present,
            late_days=late,
            attendance_rate=(present / total * 100) if total else 0.0,
            by_role=_role_counts(records),
            recent_records=records[: self._recent_limit],
        )

    def _report_row(self, record: AttendanceRecord) -> dict:
        marked_at: Optional[datetime]
        try:
            marked_at = datetime.fromisoformat(record.timestamp)
        except ValueError:
            marked_at = None

        if record.status == AttendanceStatus.LATE.value and marked_at:
            note = late_note(now=marked_at, cutoff=self._cutoff)
        elif record.status == AttendanceStatus.PRESENT.value:
            note = "Regular attendance"
        else:
            note = ""

        return {
            "date": record.date,
            "prefect_number": record.prefect_number or "-",
            "role": record.role or "-",
            "time": marked_at.strftime("%I:%M %p") if marked_at else record.timestamp,
            "status": record.status,
            "note": note,
        }

    def member_report_csv(self, prefect_number: str, *, now: Optional[datetime] = None) -> str:
        """CSV export of one member's attendance, newest first.

        The records are preceded by a summary block (totals, rate and role
        distribution) and a ``## Detailed Records`` marker line.
        """

        stats = self.member_stats(prefect_number)
        out = io.StringIO()
        writer = csv.writer(out)
        _write_summary(
            writer,
            [
                f"# Prefect Attendance Report - {prefect_number}",
                f"Generated: {format_timestamp(now or now_local())}",
                "",
                "## Summary Statistics",
                f"Total Attendance Days: {stats.total_days}",
                f"On Time Days: {stats.present_days}",
                f"Late Days: {stats.late_days}",
                f"Attendance Rate: {stats.attendance_rate:.1f}%",
            ],
            stats.by_role,
            role_suffix=" days",
        )
        writer.writerow(["## Detailed Records"])

        rows = csv.DictWriter(out, fieldnames=MEMBER_REPORT_FIELDS, extrasaction="ignore")
        rows.writeheader()
        for record in self._member_records(prefect_number):
            rows.writerow(self._report_row(record))
        return out.getvalue()

    def daily_report_csv(self, work_date: str) -> str:
        """CSV export of one day's attendance in marking order, after a summary block."""

        stats = self.daily_stats(work_date)
        records = sorted(self._attendance.list_by_date(work_date), key=lambda r: r.timestamp)
        day = parse_iso_date(work_date)

        out = io.StringIO()
        writer = csv.writer(out)
        _write_summary(
            writer,
            [
                "# Prefect Board Attendance Report",
                f"Date: {day:%B} {day.day}, {day.year}",
                f"Total Prefects: {stats.total}",
                f"On Time: {stats.present}",
                f"Late: {stats.late}",
            ],
            stats.by_role,
        )
        writer.writerow(["## Attendance Records"])

        rows = csv.DictWriter(out, fieldnames=DAILY_REPORT_FIELDS, extrasaction="ignore")
        rows.writeheader()
        for record in records:
            rows.writerow(self._report_row(record))
        return out.getvalue()


def _write_summary(writer, lines: Sequence[str], by_role: dict[str, int], *, role_suffix: str = "") -> None:
    for line in lines:
        writer.writerow([line] if line else [])
    writer.writerow([])
    writer.writerow(["## Role Distribution"])
    for role, count in by_role.items():
        writer.writerow([f"{role}: {count}{role_suffix}"])
    writer.writerow([])

from __future__ import annotations

import csv
from datetime import datetime

from conftest import InMemoryAttendance, InMemoryMembers
from prefect_attendance.attendance.service import AttendanceService
from prefect_attendance.members.service import MemberService
from prefect_attendance.reports.service import AttendanceReportService


def _seed():
    members = InMemoryMembers()
    attendance = InMemoryAttendance(members)
    svc = AttendanceService(attendance, members, MemberService(members))
    svc.mark_attendance("A100", "student", now=datetime(2026, 2, 2, 6, 40))
    svc.mark_attendance("A101", "student", now=datetime(2026, 2, 2, 7, 20))
    svc.mark_attendance("S9", "staff", now=datetime(2026, 2, 2, 8, 5))
    svc.mark_attendance("A100", "student", now=datetime(2026, 2, 3, 9, 15))
    return AttendanceReportService(attendance)


def test_daily_stats_counts_status_and_roles():
    reports = _seed()

    stats = reports.daily_stats("2026-02-02")

    assert stats.total == 3
    assert stats.present == 1
    assert stats.late == 2
    assert stats.by_role == {"student": 2, "staff": 1}


def test_daily_stats_for_empty_day():
    stats = _seed().daily_stats("2026-01-01")

    assert (stats.total, stats.present, stats.late, stats.by_role) == (0, 0, 0, {})


def test_member_stats_only_counts_exact_badge():
    stats = _seed().member_stats("A100")

    assert stats.total_days == 2
    assert stats.present_days == 1
    assert stats.late_days == 1
    assert stats.attendance_rate == 50.0
    assert [r.date for r in stats.recent_records] == ["2026-02-03", "2026-02-02"]


def test_member_stats_unknown_badge():
    stats = _seed().member_stats("nobody")

    assert stats.total_days == 0
    assert stats.attendance_rate == 0.0


def _detail_rows(content: str, marker: str) -> list[dict]:
    lines = content.splitlines()
    return list(csv.DictReader(lines[lines.index(marker) + 1 :]))


def test_member_report_csv():
    content = _seed().member_report_csv("A100", now=datetime(2026, 2, 4, 8, 0))

    rows = _detail_rows(content, "## Detailed Records")
    assert [r["date"] for r in rows] == ["2026-02-03", "2026-02-02"]
    assert rows[0]["status"] == "Late"
    assert rows[0]["time"] == "09:15 AM"
    assert rows[0]["note"] == "Arrived 2h 15m late"
    assert rows[1]["status"] == "Present"
    assert rows[1]["note"] == "Regular attendance"


def test_member_report_starts_with_summary():
    content = _seed().member_report_csv("A100", now=datetime(2026, 2, 4, 8, 0))

    summary = content.split("## Detailed Records")[0].splitlines()
    assert summary[0] == "# Prefect Attendance Report - A100"
    assert "Generated: 2026-02-04T08:00:00" in summary
    assert "Total Attendance Days: 2" in summary
    assert "On Time Days: 1" in summary
    assert "Late Days: 1" in summary
    assert "Attendance Rate: 50.0%" in summary
    assert "student: 2 days" in summary


def test_daily_report_csv_lists_day_in_marking_order():
    content = _seed().daily_report_csv("2026-02-02")

    summary = content.split("## Attendance Records")[0].splitlines()
    assert summary[:5] == [
        "# Prefect Board Attendance Report",
        "Date: February 2, 2026",
        "Total Prefects: 3",
        "On Time: 1",
        "Late: 2",
    ]
    assert "student: 2" in summary
    assert "staff: 1" in summary

    rows = _detail_rows(content, "## Attendance Records")
    assert [r["prefect_number"] for r in rows] == ["A100", "A101", "S9"]
    assert rows[0]["note"] == "Regular attendance"
    assert rows[2]["time"] == "08:05 AM"
    assert rows[2]["note"] == "Arrived 1h 5m late"


def test_daily_report_csv_for_empty_day():
    content = _seed().daily_report_csv("2026-01-01")

    assert "Total Prefects: 0" in content
    assert _detail_rows(content, "## Attendance Records") == []

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from pathlib import Path

from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .common.datetime_utils import parse_cutoff
from .core.constants import DB_FILE_NAME, DEFAULT_BUSY_TIMEOUT_SECONDS, DEFAULT_LATE_CUTOFF
from .database.connection import DBConfig, DatabaseConnection
from .members.service import MemberService
from .members.sqlite_member_repository import SQLiteMemberRepository
from .reports.service import AttendanceReportService
from .system.service import BackupService, VersionService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    members_repo: SQLiteMemberRepository
    attendance_repo: SQLiteAttendanceRepository

    member_service: MemberService
    attendance_service: AttendanceService
    report_service: AttendanceReportService
    backup_service: BackupService
    version_service: VersionService

    qr_secret: str


def db_config_from_settings(settings: dict) -> DBConfig:
    return DBConfig(
        data_dir=Path(str(settings["DATA_DIR"])).expanduser(),
        file_name=str(settings.get("DB_FILE_NAME") or DB_FILE_NAME),
        timeout=float(settings.get("DB_TIMEOUT", DEFAULT_BUSY_TIMEOUT_SECONDS)),
    )


def build_container(*, settings: dict) -> Container:
    conn = DatabaseConnection(db_config_from_settings(settings))

    cutoff_value = settings.get("LATE_CUTOFF")
    cutoff: time = parse_cutoff(cutoff_value) if cutoff_value else DEFAULT_LATE_CUTOFF

    members_repo = SQLiteMemberRepository(conn)
    attendance_repo = SQLiteAttendanceRepository(conn)

    member_service = MemberService(members_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        members_repo,
        member_service,
        strategy_factory=AttendanceStrategyFactory(cutoff=cutoff),
    )
    report_service = AttendanceReportService(attendance_repo, cutoff=cutoff)
    backup_service = BackupService(conn)
    version_service = VersionService(str(settings.get("APP_VERSION", "0.0.0")))

    return Container(
        conn=conn,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        member_service=member_service,
        attendance_service=attendance_service,
        report_service=report_service,
        backup_service=backup_service,
        version_service=version_service,
        qr_secret=str(settings.get("QR_SECRET", "")),
    )

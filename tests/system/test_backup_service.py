from __future__ import annotations

import base64
from datetime import datetime

import pytest

from prefect_attendance.core.exceptions import BackupError


def test_export_then_import_restores_previous_state(container):
    svc = container.attendance_service
    svc.mark_attendance("A100", "student", now=datetime(2026, 2, 2, 6, 0))

    blob = container.backup_service.export_backup()
    assert base64.b64decode(blob).startswith(b"SQLite format 3\x00")

    svc.wipe_all_data()
    assert svc.list_all() == []

    container.backup_service.import_backup(blob)

    restored = svc.list_all()
    assert [(r.prefect_number, r.date) for r in restored] == [("A100", "2026-02-02")]


def test_import_rejects_invalid_base64(container):
    with pytest.raises(BackupError):
        container.backup_service.import_backup("***not base64***")
    with pytest.raises(BackupError):
        container.backup_service.import_backup("")


def test_version_info(container):
    info = container.version_service.info()

    assert info.version == "1.2.3"
    assert info.update_available is False

from __future__ import annotations

import base64
import binascii
import logging
import sqlite3
from dataclasses import dataclass

from ..core.exceptions import BackupError
from ..database.connection import DatabaseConnection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersionInfo:
    version: str
    update_available: bool


class BackupService:
    """Raw file-level backup of the store.

    Import overwrites the store file as-is: no schema check, no migration.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _checkpoint(self) -> None:
        # Fold the WAL into the main file so the copy is complete.
        conn = self._conn_factory.connect()
        try:
            conn.execute("PRAGMA wal_checkpoint(TRUNCATE)")
        except sqlite3.Error as e:
            raise BackupError(f"Cannot checkpoint store: {e}") from e
        finally:
            conn.close()

    def export_backup(self) -> str:
        self._checkpoint()
        path = self._conn_factory.path
        try:
            content = path.read_bytes()
        except OSError as e:
            raise BackupError(f"Cannot read store {path}: {e}") from e
        logger.info("Exported backup of %s (%d bytes)", path, len(content))
        return base64.b64encode(content).decode("ascii")

    def import_backup(self, backup_data: str) -> None:
        try:
            content = base64.b64decode(backup_data or "", validate=True)
        except (binascii.Error, ValueError) as e:
            raise BackupError(f"Backup data is not valid base64: {e}") from e
        if not content:
            raise BackupError("Backup data is empty")

        self._checkpoint()
        path = self._conn_factory.path
        try:
            path.write_bytes(content)
            for suffix in ("-wal", "-shm"):
                stale = path.with_name(path.name + suffix)
                if stale.exists():
                    stale.unlink()
        except OSError as e:
            raise BackupError(f"Cannot write store {path}: {e}") from e
        logger.warning("Restored store %s from backup (%d bytes)", path, len(content))


class VersionService:
    """Reports the running version. There is no update channel."""

    def __init__(self, version: str):
        self._version = version

    def get_app_version(self) -> str:
        return self._version

    def check_for_updates(self) -> bool:
        return False

    def info(self) -> VersionInfo:
        return VersionInfo(version=self.get_app_version(), update_available=self.check_for_updates())

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.constants import DB_FILE_NAME, DEFAULT_BUSY_TIMEOUT_SECONDS
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    data_dir: Path
    file_name: str = DB_FILE_NAME
    timeout: float = DEFAULT_BUSY_TIMEOUT_SECONDS

    @property
    def db_path(self) -> Path:
        return Path(self.data_dir) / self.file_name


def resolve_db_path(config: DBConfig) -> Path:
    """Return the store file path, creating the data directory if absent."""
    data_dir = Path(config.data_dir).expanduser()
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Cannot create data directory {data_dir}: {e}") from e
    return data_dir / config.file_name


class DatabaseConnection:
    """Connection factory for the SQLite store.

    Note: We create short-lived connections per operation; SQLite's own
    locking (single writer, WAL readers) is the only concurrency control.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._path: Optional[Path] = None

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = resolve_db_path(self._config)
        return self._path

    def connect(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self.path), timeout=self._config.timeout)
        except sqlite3.Error as e:
            logger.error("Cannot open store %s: %s", self.path, e)
            raise StorageError(f"Cannot open store {self.path}: {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

import os
from pathlib import Path


class Config:
    # Per-user application data directory holding the store file
    DATA_DIR = os.environ.get("PREFECT_DATA_DIR") or str(Path.home() / ".prefect-attendance")
    DB_FILE_NAME = os.environ.get("PREFECT_DB_FILE", "attendance.db")
    DB_TIMEOUT = float(os.environ.get("PREFECT_DB_TIMEOUT", "5"))

    # Marks after this HH:MM are Late
    LATE_CUTOFF = os.environ.get("LATE_CUTOFF", "07:00")

    APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
    QR_SECRET = os.environ.get("QR_SECRET", "secret")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

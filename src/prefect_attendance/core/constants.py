"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DB_FILE_NAME = "attendance.db"
DEFAULT_LATE_CUTOFF = time(7, 0)
DEFAULT_BUSY_TIMEOUT_SECONDS = 5.0
DEFAULT_RECENT_RECORDS = 10

DATE_FORMAT = "%Y-%m-%d"

BADGE_TYPE = "prefect_attendance"
BADGE_SYSTEM = "prefect_attendance_kiosk"

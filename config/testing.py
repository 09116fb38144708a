import os
import tempfile

DATA_DIR = os.getenv("PREFECT_DATA_DIR", os.path.join(tempfile.gettempdir(), "prefect-attendance-test"))
DB_FILE_NAME = "attendance.db"
DB_TIMEOUT = 1.0

LATE_CUTOFF = "07:00"
APP_VERSION = "0.0.0-test"
QR_SECRET = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

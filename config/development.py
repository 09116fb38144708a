import os

from .config import Config

DATA_DIR = Config.DATA_DIR
DB_FILE_NAME = Config.DB_FILE_NAME
DB_TIMEOUT = Config.DB_TIMEOUT

LATE_CUTOFF = Config.LATE_CUTOFF
APP_VERSION = Config.APP_VERSION
QR_SECRET = Config.QR_SECRET

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

import os

from .config import Config

DATA_DIR = Config.DATA_DIR
DB_FILE_NAME = Config.DB_FILE_NAME
DB_TIMEOUT = Config.DB_TIMEOUT

LATE_CUTOFF = Config.LATE_CUTOFF
APP_VERSION = Config.APP_VERSION
QR_SECRET = os.getenv("QR_SECRET", "please-set-QR_SECRET")

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

from __future__ import annotations

import importlib

from config import get_settings_module

from prefect_attendance.container import db_config_from_settings
from prefect_attendance.database.bootstrap import init_store, list_indexes, list_tables


def main() -> None:
    settings_module = importlib.import_module(get_settings_module())
    settings = {
        key: getattr(settings_module, key)
        for key in ("DATA_DIR", "DB_FILE_NAME", "DB_TIMEOUT")
        if hasattr(settings_module, key)
    }
    db_config = db_config_from_settings(settings)

    db_path = init_store(db_config)
    tables = list_tables(db_config)
    print(f"OK: Store ready -> {db_path} (tables={len(tables)}: {', '.join(tables)})")
    indexes = list_indexes(db_config, "attendance")
    if "ux_attendance_member_date" not in indexes:
        print("WARN: attendance has duplicate daily rows; one-mark-per-day index not created")


if __name__ == "__main__":
    main()

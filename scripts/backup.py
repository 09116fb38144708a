"""Backup the store.

Writes the base64 blob served by GET /api/backup to backups/, so it can be
restored with POST /api/backup or `--restore FILE`.
"""

from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path

from prefect_attendance.main import load_settings
from prefect_attendance.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description="Export or restore the attendance store")
    parser.add_argument("--restore", metavar="FILE", help="base64 backup file to restore")
    args = parser.parse_args()

    container = build_container(settings=load_settings())
    backups = container.backup_service

    if args.restore:
        backups.import_backup(Path(args.restore).read_text(encoding="ascii").strip())
        print(f"OK: Restored {container.conn.path} from {args.restore}")
        return

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_{ts}.b64"
    out_file.write_text(backups.export_backup(), encoding="ascii")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()

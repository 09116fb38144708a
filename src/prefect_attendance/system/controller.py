from __future__ import annotations

from dataclasses import asdict

from flask import Flask, request

from ..common.responses import error_response, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", methods=["GET"], endpoint="export_backup")
    def export_backup():
        try:
            data = container.backup_service.export_backup()
        except Exception as e:
            return error_response(e, action="export backup")
        return ok(data=data)

    @app.route("/api/backup", methods=["POST"], endpoint="import_backup")
    def import_backup():
        payload = request.get_json(silent=True) or {}
        try:
            container.backup_service.import_backup(payload.get("data", ""))
        except Exception as e:
            return error_response(e, action="import backup")
        return ok(message="Backup restored")

    @app.route("/api/version", methods=["GET"], endpoint="version")
    def version():
        return ok(**asdict(container.version_service.info()))

from __future__ import annotations

from dataclasses import asdict

from flask import Flask, request

from ..badges.qr import parse_badge_payload
from ..common.datetime_utils import parse_iso_date
from ..common.responses import error_response, fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = request.get_json(silent=True) or {}
        try:
            record = service.mark_attendance(data.get("prefect_number"), data.get("role"))
        except Exception as e:
            return error_response(e, action="mark attendance")
        return ok(201, record=asdict(record), message=f"Marked {record.status}")

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        work_date = request.args.get("date")
        try:
            if work_date:
                records = service.list_by_date(work_date)
            else:
                records = service.list_all()
        except Exception as e:
            return error_response(e, action="load attendance")
        return ok(records=[asdict(r) for r in records])

    @app.route("/api/attendance/search", methods=["GET"], endpoint="search_attendance")
    def search_attendance():
        try:
            records = service.search_by_prefect_number(request.args.get("q", ""))
        except Exception as e:
            return error_response(e, action="search attendance")
        return ok(records=[asdict(r) for r in records])

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="daily_stats")
    def daily_stats():
        work_date = request.args.get("date") or service.today()
        try:
            parse_iso_date(work_date)
        except ValueError:
            return fail("Date must be YYYY-MM-DD", 400)
        try:
            stats = container.report_service.daily_stats(work_date)
        except Exception as e:
            return error_response(e, action="load statistics")
        return ok(stats=asdict(stats))

    @app.route("/api/attendance/report.csv", methods=["GET"], endpoint="daily_report_csv")
    def daily_report_csv():
        work_date = request.args.get("date") or service.today()
        try:
            parse_iso_date(work_date)
        except ValueError:
            return fail("Date must be YYYY-MM-DD", 400)
        try:
            content = container.report_service.daily_report_csv(work_date)
        except Exception as e:
            return error_response(e, action="export attendance report")
        return app.response_class(
            content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=attendance_{work_date}.csv"},
        )

    @app.route("/api/attendance/scan", methods=["POST"], endpoint="scan_badge")
    def scan_badge():
        data = request.get_json(silent=True) or {}
        code = (data.get("code") or "").strip()
        if not code:
            return fail("QR code must not be empty", 400)
        try:
            badge = parse_badge_payload(code, secret=container.qr_secret)
            record = service.mark_attendance(badge.prefect_number, badge.role)
        except Exception as e:
            return error_response(e, action="mark attendance")
        return ok(201, record=asdict(record), message=f"Marked {record.status}")

    @app.route("/api/data", methods=["DELETE"], endpoint="wipe_all_data")
    def wipe_all_data():
        try:
            service.wipe_all_data()
        except Exception as e:
            return error_response(e, action="wipe data")
        return ok(message="All data wiped")

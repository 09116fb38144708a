from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, request, send_file

from ..badges.qr import build_badge_payload, render_badge_png
from ..common.responses import error_response, fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.member_service

    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    def list_members():
        try:
            members = service.list_members()
        except Exception as e:
            return error_response(e, action="load members")
        return ok(members=[asdict(m) for m in members])

    @app.route("/api/members", methods=["POST"], endpoint="create_member")
    def create_member():
        data = request.get_json(silent=True) or {}
        try:
            member_id = service.create_member(data.get("prefect_number"), data.get("role"), data.get("name"))
        except Exception as e:
            return error_response(e, action="create member")
        return ok(201, id=member_id)

    @app.route("/api/members/<member_id>", methods=["GET"], endpoint="get_member")
    def get_member(member_id: str):
        try:
            member = service.get_member(member_id)
        except Exception as e:
            return error_response(e, action="load member")
        if not member:
            return fail(f"Unknown member {member_id}", 404)
        return ok(member=asdict(member))

    @app.route("/api/members/<member_id>", methods=["PATCH"], endpoint="update_member")
    def update_member(member_id: str):
        data = request.get_json(silent=True) or {}
        try:
            updated = service.update_member(
                member_id,
                prefect_number=data.get("prefect_number"),
                role=data.get("role"),
                name=data.get("name"),
            )
        except Exception as e:
            return error_response(e, action="update member")
        return ok(updated=updated)

    @app.route("/api/members/<member_id>", methods=["DELETE"], endpoint="delete_member")
    def delete_member(member_id: str):
        try:
            deleted = service.delete_member(member_id)
        except Exception as e:
            return error_response(e, action="delete member")
        return ok(deleted=deleted)

    @app.route("/api/members/<prefect_number>/stats", methods=["GET"], endpoint="member_stats")
    def member_stats(prefect_number: str):
        try:
            stats = container.report_service.member_stats(prefect_number)
        except Exception as e:
            return error_response(e, action="load member statistics")
        return ok(stats=asdict(stats))

    @app.route("/api/members/<prefect_number>/report.csv", methods=["GET"], endpoint="member_report_csv")
    def member_report_csv(prefect_number: str):
        try:
            content = container.report_service.member_report_csv(prefect_number)
        except Exception as e:
            return error_response(e, action="export member report")
        return app.response_class(
            content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=prefect_report_{prefect_number}.csv"},
        )

    @app.route("/api/members/<prefect_number>/badge.png", methods=["GET"], endpoint="member_badge")
    def member_badge(prefect_number: str):
        role = request.args.get("role")
        if not role:
            member = service.get_by_prefect_number(prefect_number)
            if not member:
                return fail(f"Unknown prefect number {prefect_number}", 404)
            role = member.role
        try:
            payload = build_badge_payload(prefect_number, role, secret=container.qr_secret)
            png = render_badge_png(payload)
        except Exception as e:
            return error_response(e, action="generate badge")
        return send_file(
            io.BytesIO(png),
            mimetype="image/png",
            download_name=f"prefect_qr_{prefect_number}_{role}.png",
        )

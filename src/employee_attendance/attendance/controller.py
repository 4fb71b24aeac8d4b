from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import (
    domain_error_response,
    json_body,
    make_login_required,
    message,
    server_error_response,
)
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_service.resolve)

    @app.route("/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    @login_required
    def mark_attendance():
        data = json_body()
        try:
            container.attendance_service.mark_attendance(data.get("userId"), caller=g.current_user)
            return message("Attendance marked successfully!")
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return server_error_response("marking attendance")

    @app.route("/attendances/<employee_id>", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history(employee_id: str):
        try:
            records = container.attendance_service.get_history(employee_id, caller=g.current_user)
            return jsonify({"records": [r.to_public_dict() for r in records]})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return server_error_response("fetching attendance history")

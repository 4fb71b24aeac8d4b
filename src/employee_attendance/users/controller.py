from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import (
    domain_error_response,
    json_body,
    make_login_required,
    server_error_response,
)
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_service.resolve)

    @app.route("/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = json_body()
        try:
            session = container.auth_service.register(
                data.get("employeeId"),
                data.get("name"),
                data.get("password"),
            )
            return jsonify({"token": session.token, "msg": "Account created successfully!"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return server_error_response("signing up")

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            session = container.auth_service.authenticate(data.get("employeeId"), data.get("password"))
            return jsonify({"token": session.token, "msg": "Login successful!", "role": session.user.role.value})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return server_error_response("logging in")

    @app.route("/users", methods=["GET"], endpoint="list_users")
    @login_required
    def list_users():
        try:
            users = container.user_service.list_users(
                current_role=g.current_user.role,
                current_user_id=g.current_user.user_id,
            )
            return jsonify([u.to_public_dict() for u in users])
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return server_error_response("fetching users")


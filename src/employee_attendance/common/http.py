"""Helpers shared by the JSON controllers."""
from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, Optional

from flask import g, jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server error"

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (ConflictError, 400),
    (AuthenticationError, 400),
    (AuthorizationError, 401),
    (PermissionDeniedError, 403),
    (NotFoundError, 404),
)


def status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def message(msg: str, status: int = 200, **extra):
    return jsonify({"msg": msg, **extra}), status


def domain_error_response(exc: DomainError):
    return message(str(exc), status_for(exc))


def server_error_response(action: str):
    # Details go to the log only; the caller gets a generic body.
    logger.exception("Unexpected error while %s", action)
    return message(SERVER_ERROR, 500)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def make_login_required(resolve: Callable[[Optional[str]], object]):
    """Build a decorator that resolves the bearer token into ``g.current_user``."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.current_user = resolve(bearer_token())
            except AuthorizationError as e:
                return domain_error_response(e)
            except Exception:
                return server_error_response("resolving session")
            return view(*args, **kwargs)

        return wrapper

    return login_required

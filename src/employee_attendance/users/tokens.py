"""Session token issuance and verification (signed JWT claims)."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_SECONDS, JWT_ALGORITHM
from ..core.enums import Role
from ..core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    role: Role


class TokenService:
    """Issues and verifies session tokens.

    Payload layout: ``{"user": {"id": <int>, "role": <str>}, "iat": ..., "exp": ...}``.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
        algorithm: str = JWT_ALGORITHM,
    ):
        if not secret_key:
            raise ValueError("secret_key is required")
        self._secret_key = secret_key
        self._ttl = timedelta(seconds=int(ttl_seconds))
        self._algorithm = algorithm

    def issue(self, *, user_id: int, role: Role, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "user": {"id": int(user_id), "role": role.value},
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        if not token:
            raise AuthorizationError("No token, authorization denied")

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthorizationError("Token expired") from e
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected session token: %s", type(e).__name__)
            raise AuthorizationError("Token is not valid") from e

        user = payload.get("user")
        try:
            return TokenClaims(user_id=int(user["id"]), role=Role(user["role"]))
        except (TypeError, KeyError, ValueError) as e:
            raise AuthorizationError("Token is not valid") from e

"""Signed bearer tokens (JWT) via python-jose."""

import logging
from datetime import datetime, timezone
from typing import Any

from jose import JWTError, jwt

from advisordesk.application.interfaces import TokenIssuer

logger = logging.getLogger(__name__)


class JoseTokenIssuer(TokenIssuer):
    """HS256 tokens carrying ``sub`` (user id) and ``sid`` (session id)."""

    def __init__(self, secret: str, issuer: str, algorithm: str = "HS256"):
        self._secret = secret
        self._issuer = issuer
        self._algorithm = algorithm

    def issue(self, subject: str, session_id: str, expires_at: datetime, **claims: Any) -> str:
        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            **claims,
            "sub": subject,
            "sid": session_id,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "iss": self._issuer,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any] | None:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
            )
        except JWTError as e:
            logger.debug("Rejected bearer token: %s", e)
            return None

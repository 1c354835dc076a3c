"""Signed, time-bounded access tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from login_jwt.domain.users.entities import AccessToken, TokenClaims
from login_jwt.domain.users.exceptions import InvalidTokenError
from login_jwt.domain.users.repositories import TokenIssuer

DEFAULT_TOKEN_TTL = timedelta(hours=24)


class JoseTokenIssuer(TokenIssuer):
    """Issues and verifies HMAC-signed JWTs carrying ``user_id`` and ``exp``.

    Verification never says which check failed: a bad signature, an expired
    token and a malformed payload all raise the same ``InvalidTokenError``.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TOKEN_TTL,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, user_id: int, issued_at: datetime | None = None) -> AccessToken:
        issued_at = (issued_at or datetime.now(UTC)).replace(microsecond=0)
        expires_at = issued_at + self._ttl
        claims = {
            "user_id": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        return AccessToken(user_id=user_id, token=token, expires_at=expires_at)

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_iat": True},
            )
            user_id = payload["user_id"]
            if not isinstance(user_id, int) or isinstance(user_id, bool):
                raise InvalidTokenError()
            return TokenClaims(
                user_id=user_id,
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (JWTError, KeyError, TypeError, ValueError, OverflowError) as exc:
            raise InvalidTokenError() from exc

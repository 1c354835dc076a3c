from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from login_jwt.application.services.tokens import JoseTokenIssuer
from login_jwt.domain.users.exceptions import InvalidTokenError

SECRET = "unit-test-secret"


@pytest.fixture()
def issuer() -> JoseTokenIssuer:
    return JoseTokenIssuer(SECRET)


def test_token_expires_exactly_24_hours_after_issuance(issuer: JoseTokenIssuer) -> None:
    issued_at = datetime.now(UTC).replace(microsecond=0)

    token = issuer.issue(7, issued_at=issued_at)
    claims = issuer.decode(token.token)

    assert token.expires_at == issued_at + timedelta(hours=24)
    assert claims.user_id == 7
    assert claims.issued_at == issued_at
    assert claims.expires_at == issued_at + timedelta(hours=24)
    raw = jwt.get_unverified_claims(token.token)
    assert raw["exp"] == int(issued_at.timestamp()) + 24 * 60 * 60
    assert jwt.get_unverified_header(token.token)["alg"] == "HS256"


def test_expired_token_is_rejected(issuer: JoseTokenIssuer) -> None:
    token = issuer.issue(1, issued_at=datetime.now(UTC) - timedelta(hours=25))

    with pytest.raises(InvalidTokenError):
        issuer.decode(token.token)


def test_token_signed_with_other_secret_is_rejected(issuer: JoseTokenIssuer) -> None:
    token = JoseTokenIssuer("another-secret").issue(1)

    with pytest.raises(InvalidTokenError):
        issuer.decode(token.token)


def test_swapped_payload_is_rejected(issuer: JoseTokenIssuer) -> None:
    header, _, signature = issuer.issue(1).token.split(".")
    _, payload, _ = issuer.issue(2).token.split(".")

    with pytest.raises(InvalidTokenError):
        issuer.decode(f"{header}.{payload}.{signature}")


@pytest.mark.parametrize(
    "claims",
    [
        {"exp": 9999999999, "iat": 0},
        {"user_id": "1", "exp": 9999999999, "iat": 0},
        {"user_id": 1, "iat": 0},
    ],
)
def test_tokens_with_bad_claims_are_rejected(issuer: JoseTokenIssuer, claims: dict) -> None:
    token = jwt.encode(claims, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        issuer.decode(token)


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_tokens_fail_uniformly(issuer: JoseTokenIssuer, token: str) -> None:
    with pytest.raises(InvalidTokenError) as exc_info:
        issuer.decode(token)

    assert exc_info.value.to_dict() == {
        "error": "invalid_token",
        "message": "Invalid or expired token",
    }


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JoseTokenIssuer("")

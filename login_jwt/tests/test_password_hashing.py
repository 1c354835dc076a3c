from __future__ import annotations

import pytest

from login_jwt.application.services.password_hashing import WerkzeugPasswordHasher


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


def test_hash_round_trip(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("p@ss1")

    assert hashed != "p@ss1"
    assert hasher.verify("p@ss1", hashed) is True
    assert hasher.verify("p@ss2", hashed) is False
    assert hasher.verify("", hashed) is False


def test_hash_is_salted(hasher: WerkzeugPasswordHasher) -> None:
    assert hasher.hash("p@ss1") != hasher.hash("p@ss1")


def test_default_method_is_scrypt() -> None:
    hashed = WerkzeugPasswordHasher().hash("p@ss1")

    assert hashed.startswith("scrypt:32768:8:1$")
    assert WerkzeugPasswordHasher().verify("p@ss1", hashed) is True


@pytest.mark.parametrize(
    "stored",
    ["", "hashed_password", "p@ss1", "unknown:method$salt$abcd", "pbkdf2:sha256:x$salt$abcd"],
)
def test_missing_or_corrupted_hash_never_verifies(
    hasher: WerkzeugPasswordHasher, stored: str
) -> None:
    assert hasher.verify("p@ss1", stored) is False

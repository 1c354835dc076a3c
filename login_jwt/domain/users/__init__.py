# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AccessToken, TokenClaims, User
from .exceptions import InvalidCredentialsError, InvalidTokenError, UserAlreadyExistsError
from .repositories import PasswordHasher, TokenIssuer, UserRepository

__all__ = [
    "AccessToken",
    "TokenClaims",
    "User",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "UserAlreadyExistsError",
    "PasswordHasher",
    "TokenIssuer",
    "UserRepository",
]

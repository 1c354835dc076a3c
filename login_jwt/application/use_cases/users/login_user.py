# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from login_jwt.domain.users.entities import AccessToken
from login_jwt.domain.users.exceptions import InvalidCredentialsError
from login_jwt.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._dummy_hash = password_hasher.hash("invalid-credentials-placeholder")

    def execute(self, username_or_email: str, password: str) -> AccessToken:
        user = self._users.find_by_username_or_email(username_or_email)

        if user is None:
            # Spend the same hashing time as a real mismatch.
            self._password_hasher.verify(password, self._dummy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(user.id)

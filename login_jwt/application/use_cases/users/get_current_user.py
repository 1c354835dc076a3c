"""Use-case resolving the user behind a bearer token."""

from __future__ import annotations

from login_jwt.domain.users.entities import User
from login_jwt.domain.users.exceptions import InvalidTokenError
from login_jwt.domain.users.repositories import TokenIssuer, UserRepository


class GetCurrentUserUseCase:
    def __init__(self, *, users: UserRepository, tokens: TokenIssuer) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str) -> User:
        if not token:
            raise InvalidTokenError()
        claims = self._tokens.decode(token)
        user = self._users.find_by_id(claims.user_id)
        if user is None:
            raise InvalidTokenError()
        return user

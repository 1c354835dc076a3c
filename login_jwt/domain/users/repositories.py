# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import AccessToken, TokenClaims, User


class UserRepository(Protocol):
    def find_by_username_or_email(self, username: str, email: str | None = None) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, user_id: int, issued_at: datetime | None = None) -> AccessToken: ...
    def decode(self, token: str) -> TokenClaims: ...

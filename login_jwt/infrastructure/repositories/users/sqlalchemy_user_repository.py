# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from login_jwt.domain.users.entities import User as DomainUser
from login_jwt.domain.users.exceptions import UserAlreadyExistsError
from login_jwt.domain.users.repositories import UserRepository
from login_jwt.infrastructure.db.models import User
from login_jwt.infrastructure.db.session import session_scope
from login_jwt.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(
        self, scope: Callable[[], AbstractContextManager[Session]] = session_scope
    ) -> None:
        self._scope = scope

    def find_by_username_or_email(
        self, username: str, email: str | None = None
    ) -> DomainUser | None:
        email = username if email is None else email
        with self._scope() as session:
            row = session.scalars(
                select(User)
                .where(or_(User.username == username, User.email == email))
                .order_by(User.id.asc())
                .limit(1)
            ).first()
            if not row:
                return None
            return _to_domain(row)

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._scope() as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with self._scope() as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info(f"users.add: unique constraint rejected username={user.username}")
            raise UserAlreadyExistsError() from exc

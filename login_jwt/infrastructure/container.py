# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from login_jwt.application.services.password_hashing import WerkzeugPasswordHasher
from login_jwt.application.services.tokens import JoseTokenIssuer
from login_jwt.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from login_jwt.application.use_cases.users.login_user import LoginUserUseCase
from login_jwt.application.use_cases.users.register_user import RegisterUserUseCase
from login_jwt.infrastructure.health import check_database
from login_jwt.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from login_jwt.interfaces.http.controllers.auth_controller import AuthController
from login_jwt.interfaces.http.controllers.misc_controller import MiscController
from login_jwt.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self.config.password_hashing.hash_method,
            salt_length=self.config.password_hashing.salt_length,
        )

    @cached_property
    def token_issuer(self) -> JoseTokenIssuer:
        jwt_config = self.config.jwt
        return JoseTokenIssuer(
            jwt_config.secret.get_secret_value(),
            algorithm=jwt_config.algorithm,
            ttl=timedelta(seconds=jwt_config.ttl_seconds),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository, tokens=self.token_issuer)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            current_user_use_case=self.get_current_user_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database_check=check_database)


container = Container()

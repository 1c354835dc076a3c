# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from login_jwt.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from login_jwt.application.use_cases.users.login_user import LoginUserUseCase
from login_jwt.application.use_cases.users.register_user import RegisterUserUseCase
from login_jwt.domain.users.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    UserAlreadyExistsError,
)
from login_jwt.infrastructure.audit import AuditAction, audit_log
from login_jwt.interfaces.http.dto.auth import (
    LoginRequestDTO,
    RegisterRequestDTO,
    TokenResponseDTO,
    UserResponseDTO,
)
from login_jwt.shared.errors.validation import raise_validation_error
from login_jwt.shared.logging import logger
from login_jwt.shared.middleware.request_logger import get_client_ip


def _bearer_token() -> str:
    auth_header = request.headers.get("Authorization", "")
    scheme, _, credentials = auth_header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return credentials.strip()


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._current_user_use_case = current_user_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user = self._register_use_case.execute(dto.username, dto.email, dto.password)
        except UserAlreadyExistsError:
            audit_log(
                AuditAction.REGISTER_FAILED,
                ip_address=get_client_ip(),
                details={"username": dto.username, "reason": "duplicate"},
                success=False,
            )
            raise

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=get_client_ip(),
            details={"username": dto.username},
            success=True,
        )

        payload = UserResponseDTO.model_validate(user).model_dump()
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = get_client_ip()

        try:
            token = self._login_use_case.execute(dto.username_or_email, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"identifier": dto.username_or_email},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=token.user_id,
            ip_address=ip_address,
            success=True,
        )

        payload = TokenResponseDTO(token=token.token).model_dump()
        logger.info(
            f"auth.login: ok user_id={token.user_id} expires_at={token.expires_at.isoformat()}"
        )
        return jsonify(payload), 200

    def me(self) -> tuple[Response, int]:
        try:
            user = self._current_user_use_case.execute(_bearer_token())
        except InvalidTokenError:
            audit_log(
                AuditAction.TOKEN_REJECTED,
                ip_address=get_client_ip(),
                success=False,
            )
            raise

        g.user_id = user.id
        payload = UserResponseDTO.model_validate(user).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp

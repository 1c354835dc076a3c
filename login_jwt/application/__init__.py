# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import WerkzeugPasswordHasher
from .services.tokens import JoseTokenIssuer
from .use_cases.users.get_current_user import GetCurrentUserUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "GetCurrentUserUseCase",
    "JoseTokenIssuer",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "WerkzeugPasswordHasher",
]

"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .get_current_user_use_case import GetCurrentUserUseCase
from .seed_dev_users_use_case import SeedDevUsersUseCase
from .dtos import (
    AuthResponse,
    RegisterCommand,
    UserInfo,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "GetCurrentUserUseCase",
    "SeedDevUsersUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "UserInfo",
]

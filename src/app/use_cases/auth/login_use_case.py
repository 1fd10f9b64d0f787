"""
Login Use Case

Handles user authentication and returns a signed access token.
"""

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.api.utils.password import burn_password_check, check_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Identity, UserRole
from .dtos import AuthResponse, UserInfo


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email and wrong password are indistinguishable
    - Token carries user_id, email and role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing the token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            # Always perform a hash check even if user not found
            if user is None:
                burn_password_check()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not check_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            access_token = generate_jwt(
                Identity(user_id=user.id, email=user.email, role=UserRole(user.role).value)
            )

            return Return.ok(AuthResponse(user=UserInfo.from_entity(user), token=access_token))

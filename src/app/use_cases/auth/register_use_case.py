import logging

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.api.utils.password import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Identity, User, UserRole
from .dtos import AuthResponse, RegisterCommand, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Check if email already exists
    2. Hash password with bcrypt cost factor 12
    3. Create User with role=member
    4. Commit
    5. Return user info with a signed access token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email, password, name

        Returns:
            Result[AuthResponse] or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            user = User(
                email=command.email,
                password_hash=hash_password(command.password),
                name=command.name,
                role=UserRole.member,
            )

            # A concurrent registration can still win the unique index
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            logger.info("User %s registered", user.id)

            access_token = generate_jwt(
                Identity(user_id=user.id, email=user.email, role=UserRole(user.role).value)
            )

            return Return.ok(AuthResponse(user=UserInfo.from_entity(user), token=access_token))

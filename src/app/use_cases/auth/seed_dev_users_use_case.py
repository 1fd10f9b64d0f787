"""
Seed Dev Users Use Case

Provisions a known admin and member account for local development.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from libs.result import Result, Return
from src.api.utils.password import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, UserRole

logger = logging.getLogger(__name__)

DEV_USERS = (
    ("admin@example.com", "Admin User", UserRole.admin),
    ("member@example.com", "Member User", UserRole.member),
)


class SeedDevUsersUseCase:
    """
    Creates the development accounts that do not exist yet.

    Business Rules:
    - idempotent: existing accounts (matched by email) are left untouched
    - all seeded accounts share one configured password
    - this is the only way to obtain an admin besides writing to the store
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, password: str) -> Result[List[str]]:
        """
        Returns:
            Result with the emails that were created by this call
        """
        seeded = []
        async with self.uow:
            for email, name, role in DEV_USERS:
                if await self.uow.users.get_by_email(email):
                    continue

                try:
                    await self.uow.users.create(
                        User(
                            email=email,
                            password_hash=hash_password(password),
                            name=name,
                            role=role,
                        )
                    )
                    await self.uow.commit()
                except IntegrityError:
                    # Another worker seeded it first
                    await self.uow.rollback()
                    continue

                logger.info("Seeded dev user %s (%s)", email, role.value)
                seeded.append(email)

        return Return.ok(seeded)

"""
Role Authorization

Capability checks applied on top of an authenticated Identity.
"""

from fastapi import Depends, status
from libs.result import Error
from src.api.error import ClientError
from src.depends import get_current_user
from src.domain.entities import Identity, UserRole


def has_role(identity: Identity, required_role: str) -> bool:
    """
    Check whether the identity may act with the required role.

    Admins hold every role; any other role only satisfies itself.
    """
    if identity.role == UserRole.admin.value:
        return True
    return identity.role == required_role


async def require_admin(current_user: Identity = Depends(get_current_user)) -> Identity:
    """
    Dependency guarding admin-only routes.

    Raises:
        ClientError: 403 if the caller is authenticated but not an admin
    """
    if not has_role(current_user, UserRole.admin.value):
        raise ClientError(
            Error("INSUFFICIENT_ROLE", "Admin access required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return current_user

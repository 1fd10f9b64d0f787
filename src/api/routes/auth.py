from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    UserInfo,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import Identity

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Registration

    Creates a member account and returns a signed access token.

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Email already exists
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(email=request.email, password=request.password, name=request.name)

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 400 Bad Request: Invalid input
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Raises:
        - 401 Unauthorized: Missing, invalid or expired JWT
        - 404 Not Found: User was deleted after the token was issued
    """
    use_case = GetCurrentUserUseCase(uow)
    result = await use_case.execute(current_user.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ServerError, raise_for_error
from src.api.utils.authorization import require_admin
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.categories import (
    CategoryResponse,
    CreateCategoryCommand,
    CreateCategoryUseCase,
    ListCategoriesUseCase,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import Identity

router = APIRouter(prefix="/categories", tags=["Categories"])


class CreateCategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=List[CategoryResponse])
async def list_categories(
    current_user: Identity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List categories (any authenticated user)"""
    result = await ListCategoriesUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CategoryResponse)
async def create_category(
    request: CreateCategoryRequest,
    current_user: Identity = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Category (admin only)

    Raises:
        - 401 Unauthorized: Missing, invalid or expired JWT
        - 403 Forbidden: Caller is not an admin
        - 409 Conflict: Name already in use
    """
    command = CreateCategoryCommand(name=request.name, description=request.description)
    result = await CreateCategoryUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value

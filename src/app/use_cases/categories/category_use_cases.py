from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Category


class CreateCategoryCommand(BaseModel):
    name: str
    description: Optional[str] = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime


def _to_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        name=category.name,
        description=category.description,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


class ListCategoriesUseCase:
    """Lists all categories ordered by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[CategoryResponse]]:
        async with self.uow:
            categories = await self.uow.categories.list_all()
            return Return.ok([_to_response(c) for c in categories])


class CreateCategoryUseCase:
    """Creates a category; names are unique. Callers must be admins (checked at the route)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateCategoryCommand) -> Result[CategoryResponse]:
        async with self.uow:
            existing = await self.uow.categories.get_by_name(command.name)
            if existing:
                return Return.err(
                    Error("CATEGORY_ALREADY_EXISTS", "Category name already in use")
                )

            try:
                category = await self.uow.categories.create(
                    Category(name=command.name, description=command.description)
                )
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(
                    Error("CATEGORY_ALREADY_EXISTS", "Category name already in use")
                )

            return Return.ok(_to_response(category))

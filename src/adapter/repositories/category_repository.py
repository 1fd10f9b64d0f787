from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.category_repository import ICategoryRepository
from src.domain.entities import Category


class CategoryRepository(ICategoryRepository):
    """Category repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Category]:
        stmt = select(Category).order_by(Category.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_name(self, name: str) -> Optional[Category]:
        stmt = select(Category).where(Category.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category

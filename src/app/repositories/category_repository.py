from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Category


class ICategoryRepository(ABC):
    """Category repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[Category]:
        """List all categories ordered by name"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Category]:
        """Get category by its unique name"""
        pass

    @abstractmethod
    async def create(self, category: Category) -> Category:
        """Create a new category"""
        pass

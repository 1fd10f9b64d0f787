"""
Category Use Cases
"""

from .category_use_cases import (
    CategoryResponse,
    CreateCategoryCommand,
    CreateCategoryUseCase,
    ListCategoriesUseCase,
)

__all__ = [
    "CategoryResponse",
    "CreateCategoryCommand",
    "CreateCategoryUseCase",
    "ListCategoriesUseCase",
]

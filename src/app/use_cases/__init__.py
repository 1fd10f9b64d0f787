"""
Use Cases

All use cases are organized into domain folders:
- auth/: Registration, login, current user
- risks/: Risk listing and mutation
- audit/: Audit trail retrieval
- categories/: Category management

Import from subdirectories for better organization.
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    GetCurrentUserUseCase,
)
from .risks import (
    ListRisksUseCase,
    GetRiskUseCase,
    CreateRiskUseCase,
    UpdateRiskUseCase,
    DeleteRiskUseCase,
)
from .audit import (
    GetEntityAuditLogUseCase,
)
from .categories import (
    ListCategoriesUseCase,
    CreateCategoryUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "GetCurrentUserUseCase",
    # Risks
    "ListRisksUseCase",
    "GetRiskUseCase",
    "CreateRiskUseCase",
    "UpdateRiskUseCase",
    "DeleteRiskUseCase",
    # Audit
    "GetEntityAuditLogUseCase",
    # Categories
    "ListCategoriesUseCase",
    "CreateCategoryUseCase",
]

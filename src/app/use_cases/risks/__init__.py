"""
Risk Use Cases

All risk-related business logic.
"""

from .list_risks_use_case import ListRisksUseCase
from .get_risk_use_case import GetRiskUseCase
from .create_risk_use_case import CreateRiskUseCase
from .update_risk_use_case import UpdateRiskUseCase
from .delete_risk_use_case import DeleteRiskUseCase
from .dtos import (
    CreateRiskCommand,
    UpdateRiskCommand,
    RiskResponse,
    RiskListResponse,
    PageMeta,
)

__all__ = [
    # Use Cases
    "ListRisksUseCase",
    "GetRiskUseCase",
    "CreateRiskUseCase",
    "UpdateRiskUseCase",
    "DeleteRiskUseCase",
    # DTOs - Commands
    "CreateRiskCommand",
    "UpdateRiskCommand",
    # DTOs - Responses
    "RiskResponse",
    "RiskListResponse",
    "PageMeta",
]

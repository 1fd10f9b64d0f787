"""
Risk Register Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AuditAction,
    RiskSeverity,
    RiskStatus,
    UserRole,
)

# Export all entities
from .user import User
from .category import Category
from .risk import Risk
from .audit_log import AuditLog
from .identity import Identity

__all__ = [
    # Enums
    "AuditAction",
    "RiskSeverity",
    "RiskStatus",
    "UserRole",
    # Entities
    "User",
    "Category",
    "Risk",
    "AuditLog",
    "Identity",
]

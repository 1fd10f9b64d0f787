"""
Risk Register Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Global user role"""

    admin = "admin"
    member = "member"


class RiskStatus(str, Enum):
    """Lifecycle status of a risk"""

    open = "open"
    mitigating = "mitigating"
    resolved = "resolved"
    accepted = "accepted"


class RiskSeverity(str, Enum):
    """Severity of a risk"""

    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class AuditAction(str, Enum):
    """Action recorded by an audit log entry"""

    created = "created"
    updated = "updated"
    deleted = "deleted"

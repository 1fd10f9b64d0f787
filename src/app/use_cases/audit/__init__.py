"""
Audit Use Cases

All audit-related business logic.
"""

from .get_entity_audit_log_use_case import AuditLogEntryResponse, GetEntityAuditLogUseCase

__all__ = [
    "AuditLogEntryResponse",
    "GetEntityAuditLogUseCase",
]

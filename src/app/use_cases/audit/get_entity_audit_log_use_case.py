"""
Get Entity Audit Log Use Case

Retrieves the audit history of one entity.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from config import ApplicationConfig
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction

MAX_AUDIT_LIMIT = 100


class AuditLogEntryResponse(BaseModel):
    """Single audit entry"""

    id: int
    entity_type: str
    entity_id: str
    action: str
    changes: Dict[str, Any]
    user_id: str
    user_name: str
    created_at: datetime


class GetEntityAuditLogUseCase:
    """
    Use case for listing the audit trail of an entity.

    Business Rules:
    - newest first, ties in reverse insertion order
    - works for deleted entities; history outlives the entity
    - user_name is empty when the acting user no longer exists
    - changes is empty for deletions
    - limit outside 1..100 falls back to AUDIT_LIST_LIMIT
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, entity_type: str, entity_id: str, limit: Optional[int] = None
    ) -> Result[List[AuditLogEntryResponse]]:
        if limit is None or not 1 <= limit <= MAX_AUDIT_LIMIT:
            limit = ApplicationConfig.AUDIT_LIST_LIMIT

        async with self.uow:
            rows = await self.uow.audit_logs.list_by_entity(entity_type, entity_id, limit=limit)

            entries = [
                AuditLogEntryResponse(
                    id=entry.id,
                    entity_type=entry.entity_type,
                    entity_id=entry.entity_id,
                    action=AuditAction(entry.action).value,
                    changes=entry.changes or {},
                    user_id=entry.user_id,
                    user_name=user_name or "",
                    created_at=entry.created_at,
                )
                for entry, user_name in rows
            ]

            return Return.ok(entries)

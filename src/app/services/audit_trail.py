"""
Audit Trail

Writes the field-level history of entity mutations.

Audit writes are committed on their own, after (or, for deletes, before) the
primary mutation. A failed audit write is logged and rolled back; it never
reverses a committed mutation. Callers decide whether a failed write fails
their request.
"""

import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, AuditLog

logger = logging.getLogger(__name__)


def audit_value(value: Any) -> Any:
    """JSON-safe representation of a field value"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def field_change(old_value: Any, new_value: Any) -> Dict[str, Any]:
    return {"from": audit_value(old_value), "to": audit_value(new_value)}


class AuditTrail:
    """Records created/updated/deleted events through the unit of work"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record_create(
        self, entity_type: str, entity_id: str, fields: Dict[str, Any], user_id: str
    ) -> bool:
        """Record the complete initial field set of a new entity"""
        changes = {name: audit_value(value) for name, value in fields.items()}
        return await self._record(entity_type, entity_id, AuditAction.created, changes, user_id)

    async def record_update(
        self,
        entity_type: str,
        entity_id: str,
        changes: Dict[str, Dict[str, Any]],
        user_id: str,
    ) -> bool:
        """
        Record a sparse {field: {"from", "to"}} diff.

        An empty diff writes nothing.
        """
        if not changes:
            return True
        return await self._record(entity_type, entity_id, AuditAction.updated, changes, user_id)

    async def record_delete(self, entity_type: str, entity_id: str, user_id: str) -> bool:
        """Record a deletion; must run before the entity disappears"""
        return await self._record(entity_type, entity_id, AuditAction.deleted, None, user_id)

    async def _record(
        self,
        entity_type: str,
        entity_id: str,
        action: AuditAction,
        changes: Optional[Dict[str, Any]],
        user_id: str,
    ) -> bool:
        entry = AuditLog(
            entity_type=entity_type,
            entity_id=entity_id,
            action=action,
            changes=changes,
            user_id=user_id,
        )
        try:
            await self.uow.audit_logs.create(entry)
            await self.uow.commit()
        except SQLAlchemyError:
            logger.exception(
                "Audit write failed: %s %s %s by %s",
                entity_type,
                entity_id,
                action.value,
                user_id,
            )
            await self.uow.rollback()
            return False
        return True

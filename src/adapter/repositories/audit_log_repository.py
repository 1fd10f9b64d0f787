from typing import List, Optional, Tuple

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.domain.entities import AuditLog, User


class AuditLogRepository(IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_log: AuditLog) -> AuditLog:
        """Append a new audit log entry (immutable)"""
        self.session.add(audit_log)
        await self.session.flush()
        await self.session.refresh(audit_log)
        return audit_log

    async def list_by_entity(
        self, entity_type: str, entity_id: str, limit: int = 50
    ) -> List[Tuple[AuditLog, Optional[str]]]:
        """
        Get audit entries for one entity, newest first.

        The user join is an outer join so entries written by since-deleted
        users are still returned, with a None name.
        """
        stmt = (
            select(AuditLog, User.name)
            .join(User, col(User.id) == col(AuditLog.user_id), isouter=True)
            .where(AuditLog.entity_type == entity_type)
            .where(AuditLog.entity_id == entity_id)
            .order_by(col(AuditLog.created_at).desc(), col(AuditLog.id).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return [(entry, user_name) for entry, user_name in result.all()]

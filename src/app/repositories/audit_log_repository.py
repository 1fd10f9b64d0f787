from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.entities import AuditLog


class IAuditLogRepository(ABC):
    """AuditLog repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_log: AuditLog) -> AuditLog:
        """Append a new audit log entry (immutable)"""
        pass

    @abstractmethod
    async def list_by_entity(
        self, entity_type: str, entity_id: str, limit: int = 50
    ) -> List[Tuple[AuditLog, Optional[str]]]:
        """
        Get audit entries for one entity, newest first.

        Returns:
            List of (entry, acting user's name) pairs. The name is None when
            the user no longer exists. Ties on created_at are returned in
            reverse insertion order.
        """
        pass

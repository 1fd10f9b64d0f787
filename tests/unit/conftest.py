import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)

    uow.categories = MagicMock()
    uow.categories.list_all = AsyncMock(return_value=[])
    uow.categories.get_by_name = AsyncMock(return_value=None)
    uow.categories.create = AsyncMock(side_effect=lambda category: category)

    uow.risks = MagicMock()
    uow.risks.list = AsyncMock(return_value=([], 0))
    uow.risks.get_by_id = AsyncMock()
    uow.risks.create = AsyncMock(side_effect=lambda risk: risk)
    uow.risks.update = AsyncMock(side_effect=lambda risk: risk)
    uow.risks.delete = AsyncMock(return_value=True)

    uow.audit_logs = MagicMock()
    uow.audit_logs.create = AsyncMock(side_effect=lambda entry: entry)
    uow.audit_logs.list_by_entity = AsyncMock(return_value=[])
    return uow

import pytest
from unittest.mock import AsyncMock
from sqlalchemy.exc import IntegrityError

from src.api.utils.password import check_password
from src.app.use_cases.auth import RegisterCommand, RegisterUseCase
from src.domain.entities import User, UserRole


@pytest.mark.asyncio
async def test_register_creates_member(mock_uow):
    mock_uow.users.get_by_email.return_value = None

    use_case = RegisterUseCase(mock_uow)
    result = await use_case.execute(
        RegisterCommand(email="new@acme.com", password="SecurePass123!", name="New User")
    )

    assert result.is_ok()
    assert result.value.user.role == "member"
    assert result.value.token

    created = mock_uow.users.create.call_args.args[0]
    assert created.role == UserRole.member
    assert created.password_hash != "SecurePass123!"
    assert check_password("SecurePass123!", created.password_hash)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_register_existing_email(mock_uow):
    mock_uow.users.get_by_email.return_value = User(
        id="u1", email="taken@acme.com", password_hash="hash", name="Taken"
    )

    use_case = RegisterUseCase(mock_uow)
    result = await use_case.execute(
        RegisterCommand(email="taken@acme.com", password="SecurePass123!", name="Dup")
    )

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_register_unique_violation_race(mock_uow):
    """The unique index catches a registration that slipped past the lookup"""
    mock_uow.users.get_by_email.return_value = None
    mock_uow.users.create = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("unique")))

    use_case = RegisterUseCase(mock_uow)
    result = await use_case.execute(
        RegisterCommand(email="race@acme.com", password="SecurePass123!", name="Race")
    )

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.rollback.assert_called_once()

import pytest

from src.api.utils.jwt import verify_jwt
from src.api.utils.password import hash_password
from src.app.use_cases.auth.login_use_case import LoginUseCase
from src.domain.entities import User, UserRole


@pytest.fixture
def existing_user():
    return User(
        id="user-1",
        email="user@acme.com",
        password_hash=hash_password("SecurePass123!"),
        name="Ada",
        role=UserRole.admin,
    )


@pytest.mark.asyncio
async def test_successful_login(mock_uow, existing_user):
    """Valid credentials return user info and a token carrying the role"""
    mock_uow.users.get_by_email.return_value = existing_user

    use_case = LoginUseCase(mock_uow)
    result = await use_case.execute("user@acme.com", "SecurePass123!")

    assert result.is_ok()
    data = result.value
    assert data.user.email == "user@acme.com"
    assert data.user.role == "admin"

    identity = verify_jwt(data.token)
    assert identity.user_id == "user-1"
    assert identity.email == "user@acme.com"
    assert identity.role == "admin"

    mock_uow.users.get_by_email.assert_called_once_with("user@acme.com")


@pytest.mark.asyncio
async def test_login_invalid_credentials_wrong_password(mock_uow, existing_user):
    mock_uow.users.get_by_email.return_value = existing_user

    use_case = LoginUseCase(mock_uow)
    result = await use_case.execute("user@acme.com", "WrongPassword!")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_invalid_credentials_nonexistent_user(mock_uow):
    mock_uow.users.get_by_email.return_value = None

    use_case = LoginUseCase(mock_uow)
    result = await use_case.execute("nonexistent@acme.com", "SomePassword!")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"

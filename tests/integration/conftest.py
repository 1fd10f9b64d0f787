import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.api.utils.jwt import generate_jwt
from src.api.utils.password import hash_password
from src.depends import get_unit_of_work
from src.domain.entities import Identity, User, UserRole


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    app = create_app(ApplicationConfig)

    # One session per request, as in production
    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def member(client):
    """Registered member: (user info, auth headers)"""
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "member@acme.com", "password": "SecurePass123!", "name": "Mia Member"},
    )
    assert response.status_code == 201
    data = response.json()
    return data["user"], {"Authorization": f"Bearer {data['token']}"}


@pytest_asyncio.fixture
async def admin(db_session):
    """Admin provisioned directly in the store: (user, auth headers)"""
    user = User(
        email="admin@acme.com",
        password_hash=hash_password("AdminPass123!"),
        name="Ada Admin",
        role=UserRole.admin,
    )
    db_session.add(user)
    await db_session.commit()
    token = generate_jwt(Identity(user_id=user.id, email=user.email, role="admin"))
    return user, {"Authorization": f"Bearer {token}"}

import pytest
from httpx import AsyncClient
from sqlmodel import select

from config import ApplicationConfig
from src.api.app import run_startup_tasks
from src.domain.entities import User


class SeedingConfig(ApplicationConfig):
    CREATE_TABLES_ON_STARTUP = True
    SEED_DEV_USERS = True
    SEED_DEV_PASSWORD = "password123"


@pytest.mark.asyncio
async def test_seeded_admin_can_reach_admin_routes(client: AsyncClient, engine):
    await run_startup_tasks(SeedingConfig, engine)

    login = await client.post("/api/v1/auth/login", json={
        "email": "admin@example.com",
        "password": "password123",
    })
    assert login.status_code == 200
    assert login.json()["user"]["role"] == "admin"

    headers = {"Authorization": f"Bearer {login.json()['token']}"}
    created = await client.post("/api/v1/categories", json={"name": "Operations"}, headers=headers)
    assert created.status_code == 201


@pytest.mark.asyncio
async def test_seeded_member_is_not_admin(client: AsyncClient, engine):
    await run_startup_tasks(SeedingConfig, engine)

    login = await client.post("/api/v1/auth/login", json={
        "email": "member@example.com",
        "password": "password123",
    })
    assert login.status_code == 200
    assert login.json()["user"]["role"] == "member"


@pytest.mark.asyncio
async def test_seeding_twice_creates_each_user_once(engine, db_session):
    await run_startup_tasks(SeedingConfig, engine)
    await run_startup_tasks(SeedingConfig, engine)

    users = (await db_session.exec(select(User))).all()
    assert sorted(u.email for u in users) == ["admin@example.com", "member@example.com"]


@pytest.mark.asyncio
async def test_seeding_is_off_by_default(client: AsyncClient, engine):
    await run_startup_tasks(ApplicationConfig, engine)

    login = await client.post("/api/v1/auth/login", json={
        "email": "admin@example.com",
        "password": "password123",
    })
    assert login.status_code == 401

from typing import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from app.core.config import Settings
from app.main import create_app

DEFAULT_PASSWORD = "Sup3r-secret"


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite://",
        secret_key="test-secret-key",
        log_level="WARNING",
    )


@pytest.fixture(name="app")
def app_fixture(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture(name="client")
def client_fixture(app: FastAPI) -> Generator[TestClient, None, None]:
    # entering the client runs the lifespan, which creates the schema
    with TestClient(app) as client:
        yield client


@pytest.fixture(name="register_user")
def register_user_fixture(client: TestClient) -> Callable:
    def _register(name: str = "Alice", email: str = "alice@example.com", password: str = DEFAULT_PASSWORD):
        return client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )

    return _register


@pytest.fixture(name="count_rows")
def count_rows_fixture(client: TestClient, app: FastAPI) -> Callable:
    """Count rows of a model, running on the app's event loop."""

    async def _count(model) -> int:
        async with app.state.sessionmaker() as db:
            return await db.scalar(select(func.count()).select_from(model))

    def _run(model) -> int:
        return client.portal.call(_count, model)

    return _run

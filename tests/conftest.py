import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient
from mon_ai.core.config import Settings
from mon_ai.dependencies.database import Database
from mon_ai.main import create_app


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'test_mon_ai.db'}",
        "GEMINI_API_KEY": None,
        "LANGFUSE_PUBLIC_KEY": None,
        "LANGFUSE_SECRET_KEY": None,
        "LOG_FILE": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_completion_client(content=None, error=None) -> MagicMock:
    """Stand-in for AsyncOpenAI returning ``content`` as the model's reply."""
    client = MagicMock()
    if error is not None:
        client.chat.completions.create = AsyncMock(side_effect=error)
        return client
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    client.chat.completions.create = AsyncMock(return_value=response)
    return client


@pytest.fixture
def test_settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def test_app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def test_client(test_app):
    with TestClient(test_app) as client:
        yield client


@pytest.fixture
async def test_db(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test_crud.db'}")
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
async def db_session(test_db):
    async with test_db.async_session_maker() as session:
        yield session

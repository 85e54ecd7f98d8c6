"""Shared fixtures: stores for both backends and an HTTP client over the app.

Every test gets a fresh store. The SQL backend runs on an in-memory SQLite
database through aiosqlite; the app lifespan is not started, the store is
injected by overriding the get_store dependency.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_QUESTIONS", "false")

from qa_service.app.database import init_db, make_engine, make_sessionmaker  # noqa: E402
from qa_service.app.dependencies import get_store  # noqa: E402
from qa_service.app.main import app  # noqa: E402
from qa_service.app.store import InMemoryQuestionStore, SqlQuestionStore  # noqa: E402


@pytest.fixture
async def sql_store():
    engine = make_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    yield SqlQuestionStore(make_sessionmaker(engine))
    await engine.dispose()


@pytest.fixture
def memory_store():
    return InMemoryQuestionStore()


@pytest.fixture(params=["memory", "sql"])
async def store(request):
    """Runs the test once per backend."""
    if request.param == "memory":
        yield InMemoryQuestionStore()
        return
    engine = make_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    yield SqlQuestionStore(make_sessionmaker(engine))
    await engine.dispose()


@pytest.fixture
async def client(store):
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

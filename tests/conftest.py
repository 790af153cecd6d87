import asyncio
import os
import tempfile
from typing import Any

_tmp = tempfile.mkdtemp(prefix="interview-prep-tests-")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_tmp}/app.db"
os.environ["UPLOADS_DIR"] = os.path.join(_tmp, "uploads")
os.environ["GEMINI_API_KEY"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from app.apis.deps import get_generation_client  # noqa: E402
from app.core.db.base import Base, get_session  # noqa: E402
from app.core.db.schemas.auth import User  # noqa: E402
from app.modules.auth import current_active_user  # noqa: E402
from main import app as fastapi_app  # noqa: E402


def envelope(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class StubGenerationClient:
    """Stand-in for GenerationClient that records prompts."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return envelope(self.text)


@pytest.fixture
def session_maker(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool
    )

    async def _create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create())
    yield async_sessionmaker(engine, expire_on_commit=False)
    asyncio.run(engine.dispose())


def _make_user(session_maker, email: str) -> User:
    async def _insert() -> User:
        async with session_maker() as s:
            user = User(
                email=email,
                hashed_password="not-a-real-hash",
                is_active=True,
                is_superuser=False,
                is_verified=False,
                name=email.split("@")[0],
            )
            s.add(user)
            await s.commit()
            await s.refresh(user)
            return user

    return asyncio.run(_insert())


@pytest.fixture
def user(session_maker) -> User:
    return _make_user(session_maker, "alice@example.com")


@pytest.fixture
def other_user(session_maker) -> User:
    return _make_user(session_maker, "bob@example.com")


@pytest.fixture
def stub_client() -> StubGenerationClient:
    return StubGenerationClient()


@pytest.fixture
def app(session_maker, stub_client):
    async def _get_session():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    fastapi_app.dependency_overrides[get_session] = _get_session
    fastapi_app.dependency_overrides[get_generation_client] = lambda: stub_client
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def anon_client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def client(app, user):
    app.dependency_overrides[current_active_user] = lambda: user
    with TestClient(app) as c:
        yield c


def login_as(app, user: User) -> None:
    app.dependency_overrides[current_active_user] = lambda: user

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./.pytest_micro_sns.db"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from micro_sns.api.deps import get_db
from micro_sns.db.base import Base
from micro_sns.db.session import build_engine, build_session_maker
from micro_sns.main import app


def _session_maker_for(url: str):
    return build_session_maker(build_engine(url, poolclass=NullPool))


def _override_for(url: str):
    session_maker = _session_maker_for(url)

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return override_get_db


@pytest.fixture()
def db_path(tmp_path):
    path = tmp_path / "test.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture()
def session_maker(db_path):
    """Sessions on the same database the client fixture serves."""
    return _session_maker_for(f"sqlite+aiosqlite:///{db_path}")


@pytest.fixture()
def client(db_path):
    app.dependency_overrides[get_db] = _override_for(f"sqlite+aiosqlite:///{db_path}")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def broken_client(tmp_path):
    missing = tmp_path / "no-such-dir" / "test.db"
    app.dependency_overrides[get_db] = _override_for(f"sqlite+aiosqlite:///{missing}")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(client):
    counter = {"n": 0}

    def _make(name: str | None = None, password: str = "pw123456") -> int:
        counter["n"] += 1
        name = name or f"user{counter['n']}"
        res = client.post(
            "/api/users/register",
            json={"name": name, "email": f"{name}{counter['n']}@x.com", "password": password},
        )
        assert res.status_code == 201, res.text
        return res.json()["data"]["user_id"]

    return _make


@pytest.fixture()
def make_post(client):
    def _make(user_id: int, content: str = "hello") -> int:
        res = client.post("/api/posts", json={"user_id": user_id, "content": content})
        assert res.status_code == 201, res.text
        return res.json()["data"]["post_id"]

    return _make

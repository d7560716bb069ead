from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from datetime import date
from pathlib import Path

import httpx
import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from litterbook.config.settings import Settings
from litterbook.infrastructure.db.base import Base
from litterbook.infrastructure.db.orm import kitten, litter  # noqa: F401
from litterbook.interfaces.http.deps import get_today
from litterbook.interfaces.http.main import create_app

TODAY = date(2024, 3, 10)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "strict_phase_transitions": False,
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    app = create_app(settings=test_settings)
    app.dependency_overrides[get_today] = lambda: TODAY
    return app


@pytest.fixture()
async def client(app) -> AsyncIterator[httpx.AsyncClient]:
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await engine.dispose()

import os
import tempfile
from pathlib import Path

import pytest

# The service reads DATABASE_URL at import time, so point it at a scratch
# sqlite file before anything from products_service is imported.
TEST_DB = Path(tempfile.mkdtemp(prefix="products-tests-")) / "products.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB}"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from products_service.database import Base, make_engine  # noqa: E402
from products_service.main import app  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    """API client over a fresh database; tables come from the startup hook."""
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    TEST_DB.unlink(missing_ok=True)


@pytest.fixture
async def db_session(tmp_path):
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'repository.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    maker = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    async with maker() as session:
        yield session
    await engine.dispose()

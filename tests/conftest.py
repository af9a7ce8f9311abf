"""
Shared fixtures: an in-memory SQLite database per test, the voting services'
usual records, and an HTTP client bound to the same database.
"""

# Standard library imports
import os

# Configure settings before the application modules read them
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

# Third-party imports
from httpx import ASGITransport, AsyncClient  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

# Local application imports
from voteschallenge.core.db import create_async_engine, get_async_session  # noqa: E402
from voteschallenge.models import Base  # noqa: E402
from voteschallenge.schemas.voting import AssociateCreate, RulingCreate, SessionCreate  # noqa: E402
from voteschallenge.services.voting import create_ruling, open_session, register_associate  # noqa: E402
from voteschallenge.utils.validators import generate_cpf  # noqa: E402


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def ruling(db):
    return await create_ruling(db, RulingCreate(title="Title test", description="Description test"))


@pytest_asyncio.fixture
async def voting_session(db, ruling):
    return await open_session(db, SessionCreate(ruling_id=ruling.id, duration=60))


@pytest_asyncio.fixture
async def closed_session(db, ruling):
    # Negative duration: the window ended before it started
    return await open_session(db, SessionCreate(ruling_id=ruling.id, duration=-10))


@pytest_asyncio.fixture
async def associate(db):
    return await register_associate(db, AssociateCreate(name="Name test", cpf=generate_cpf()))


@pytest_asyncio.fixture
async def client(session_factory):
    # Local application imports
    from main import app

    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()

"""
Test infrastructure for the News API.

Strategy
--------
- SQLite in-memory via aiosqlite removes the need for a running Postgres
  instance in CI.
- StaticPool forces all async tasks to share the same in-memory database
  connection; SQLite in-memory databases are connection-scoped and a new
  connection would see an empty database.
- The app's get_db dependency is overridden so every test-time request uses
  the test session factory rather than the production one.
- Before each test the tables are created and the fixture dataset is
  seeded; after it they are dropped.  Ids therefore start from 1 again
  in every test (articles 1..12, comments 1..18).
- The Redis cache is disabled by setting cache._redis = None; the
  CacheManager treats that as a permanent miss.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from news_api.cache import cache
from news_api.data.test_data import TEST_DATA
from news_api.database import Base, get_db
from news_api.main import app
from news_api.middleware import install_query_counter
from news_api.seed import seed

# ---------------------------------------------------------------------------
# Test database engine - SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    # Every session ends with an explicit commit or rollback.  Resetting the
    # shared connection when one session closes would roll back the work of
    # any request still in flight on it.
    pool_reset_on_return=None,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override - replace production get_db with the test session factory
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create and seed all tables before each test, drop them after."""
    cache._redis = None
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with async_session_test() as session:
        await seed(session, TEST_DATA)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """
    Yield a live AsyncSession for tests that call services directly.
    Changes are never committed.
    """
    async with async_session_test() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def captured_sql():
    """Collect every SQL statement sent to the test engine during the test."""
    statements: list[str] = []

    def _capture(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine_test.sync_engine, "before_cursor_execute", _capture)
    yield statements
    event.remove(engine_test.sync_engine, "before_cursor_execute", _capture)

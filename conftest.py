"""Root conftest: real PostgreSQL via Testcontainers for integration tests.

Unit tests run against an in-memory store (tests/conftest.py). Integration
tests run the seeder against a genuine PostgreSQL container and are skipped
unless COLLABIA_USE_TESTCONTAINERS=true.
"""
from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from testcontainers.postgres import PostgresContainer


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers to suppress PytestUnknownMarkWarning."""
    config.addinivalue_line("markers", "unit: Fast tests against the in-memory store")
    config.addinivalue_line("markers", "integration: Requires a real PostgreSQL container")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Skip integration tests unless Testcontainers is enabled."""
    skip_no_containers = pytest.mark.skip(
        reason="Testcontainers disabled, set COLLABIA_USE_TESTCONTAINERS=true"
    )
    use_testcontainers = os.getenv("COLLABIA_USE_TESTCONTAINERS", "false").lower() == "true"

    for item in items:
        if "integration" in item.keywords and not use_testcontainers:
            item.add_marker(skip_no_containers)


# ---------------------------------------------------------------------------
# Container fixtures (session-scoped, started once)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """Start a real PostgreSQL container for the entire test session."""
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def database_url(postgres_container: PostgresContainer) -> str:
    """psycopg2-style URL from the container; the seeder rewrites it for asyncpg."""
    return postgres_container.get_connection_url()


# ---------------------------------------------------------------------------
# Database engine + session fixtures
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Async engine on a freshly created Collabia schema.

    Function-scoped so each test starts from empty tables and the engine lives
    on the same event loop as the test.
    """
    from src.collabia_seed import models  # noqa: F401
    from src.collabia_seed.database import Base, create_engine, init_db

    engine = create_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await init_db(engine)

    yield engine
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return an async sessionmaker bound to the test engine.

    Each test should open its own session via `async with db_session_factory() as session`.
    """
    from src.collabia_seed.database import create_session_factory

    return create_session_factory(db_engine)

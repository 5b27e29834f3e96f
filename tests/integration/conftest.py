"""Session-scoped fixtures for integration tests against a real Postgres."""

import shutil
import warnings
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from testcontainers.core.container import DockerContainer
from testcontainers.core.waiting_utils import wait_for_logs

from tests.conftest import SAMPLE_RECORDS

POSTGRES_IMAGE = "postgres:16-alpine"
_READY_LINE = "database system is ready to accept connections"


def _postgres_ready(logs: str) -> bool:
    # The official image logs the line once for the init server and once for the real one.
    return logs.count(_READY_LINE) >= 2


@pytest.fixture(scope="session")
def postgres_container() -> Generator[DockerContainer, None, None]:
    if shutil.which("docker") is None:
        pytest.skip("docker is not available")
    container = DockerContainer(POSTGRES_IMAGE).with_exposed_ports(5432).with_env("POSTGRES_PASSWORD", "postgres")
    container.start()
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        wait_for_logs(container, _postgres_ready, timeout=60)
    yield container
    container.stop()


@pytest.fixture(scope="session")
def test_db_url(postgres_container: DockerContainer) -> str:
    host = postgres_container.get_container_host_ip()
    port = postgres_container.get_exposed_port(5432)
    return f"postgresql+asyncpg://postgres:postgres@{host}:{port}/postgres"


@pytest_asyncio.fixture
async def database(test_db_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Per-test engine with a freshly filled ``resources`` table."""
    engine = create_async_engine(test_db_url, future=True)
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS resources"))
        await conn.execute(
            text("CREATE TABLE resources (id INTEGER PRIMARY KEY, pid INTEGER, name TEXT NOT NULL, code TEXT)")
        )
        await conn.execute(
            text("INSERT INTO resources (id, pid, name, code) VALUES (:id, :pid, :name, :code)"),
            SAMPLE_RECORDS,
        )
    yield engine
    await engine.dispose()

import os

import pytest
from aiohttp.test_utils import TestClient
from faker import Faker
from faker.providers import lorem, misc
from tortoise import Tortoise

from tests.util import build_test_app
from toolshed.models import Tool
from toolshed.service import ToolService
from toolshed.signals import DATABASE_MODELS
from toolshed.store import MemoryStore, DatabaseStore

pytest_plugins = 'aiohttp.pytest_plugin'

fake = Faker()
fake.add_provider(lorem)
fake.add_provider(misc)


@pytest.fixture(scope="session")
def database_url():
    return os.getenv("DATABASE_URL", "sqlite://:memory:")


@pytest.fixture
async def database(loop, database_url):
    await Tortoise.init(
        db_url=database_url,
        modules={'models': DATABASE_MODELS},
    )
    await Tortoise.generate_schemas(safe=True)
    yield
    await Tortoise._drop_databases()


@pytest.fixture(params=["memory", "database"])
def store(request, database):
    """Runs the test once against each of the stores."""
    return MemoryStore() if request.param == "memory" else DatabaseStore()


@pytest.fixture
def tool_service(store) -> ToolService:
    return ToolService(store)


@pytest.fixture
async def client(aiohttp_client, tool_service) -> TestClient:
    return await aiohttp_client(build_test_app(tool_service))


@pytest.fixture
def random_tool_factory(tool_service):
    async def create_tool(name=None):
        # hex digests make accidental name prefixes vanishingly unlikely
        return await tool_service.add(Tool(name or fake.sha1(), fake.sentence()))

    return create_tool


@pytest.fixture
async def random_tool(random_tool_factory) -> Tool:
    """Creates a random tool in the store."""
    return await random_tool_factory()

import copy

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine

from app.main import app
from app.db.database import init_db
from app.services.wizard_directory_service import WizardDirectoryService
from app.store.memory import InMemoryDocumentStore
from app.store.sql import SqlDocumentStore


NETWORK = 'rinkeby'

OWNER_1 = '0x12D062B19a2DF1920eb9FC28Bd6E9A7E936de4c2'
OWNER_2 = '0xA1b02d8c67b0FDCF4E379855868DeB470E169401'

WIZARDS = [
    {
        'affinity': 2,
        'ascending': False,
        'ascensionOpponent': 0,
        'id': '293',
        'maxPower': 110000000000000,
        'molded': False,
        'nonce': 0,
        'owner': OWNER_1,
        'power': 110000000000000,
        'online': True,
        'ready': True,
    },
    {
        'affinity': 4,
        'ascending': False,
        'ascensionOpponent': 0,
        'id': '3117',
        'maxPower': 98000000000000,
        'molded': False,
        'nonce': 2,
        'owner': OWNER_1,
        'power': 97500000000000,
        'online': True,
        'ready': False,
    },
    {
        'affinity': 3,
        'ascending': False,
        'ascensionOpponent': 0,
        'id': '6208',
        'maxPower': 125038910370365,
        'molded': False,
        'nonce': 0,
        'owner': OWNER_2,
        'power': 125038910370365,
        'online': True,
        'ready': True,
    },
    {
        'affinity': 1,
        'ascending': True,
        'ascensionOpponent': 6208,
        'id': '1045',
        'maxPower': 70000000000000,
        'molded': True,
        'nonce': 5,
        'owner': OWNER_2,
        'power': 64000000000000,
        'online': False,
        'ready': False,
    },
]


@pytest.fixture
def wizards():
    """Fresh copy of the sample wizard records."""
    return copy.deepcopy(WIZARDS)


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture(params=['memory', 'sql'])
async def store(request, tmp_path):
    """Every local store backend in turn; sql runs over a throwaway SQLite file."""
    if request.param == 'memory':
        store = InMemoryDocumentStore()
    else:
        engine = create_async_engine(f'sqlite+aiosqlite:///{tmp_path / "documents.db"}')
        await init_db(engine)
        store = SqlDocumentStore(engine)
    yield store
    await store.close()


@pytest.fixture
def directory(store):
    return WizardDirectoryService(store)


@pytest.fixture
async def client(memory_store):
    """Async HTTP client for testing, backed by an in-memory store."""
    app.state.store = memory_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac
    app.state.store = None

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from userhub import deps, main
from userhub.domain.users.repo import InMemoryUserRepository
from userhub.domain.users.service import UserService
from userhub.infra import memory_index, postgres
from userhub.infra.memory_index import MemorySearchTransport
from userhub.search.clients import UserSearchClient


@pytest.fixture(autouse=True)
def reset_index():
	memory_index.reset_state()
	yield
	memory_index.reset_state()


@pytest.fixture(autouse=True)
def patch_postgres(monkeypatch):
	async def _noop(*args, **kwargs):
		return None

	monkeypatch.setattr(postgres, "init_pool", _noop)
	monkeypatch.setattr(postgres, "close_pool", _noop)
	monkeypatch.setattr(main, "ensure_schema", _noop)


@pytest.fixture
def search_client():
	return UserSearchClient(transport=MemorySearchTransport(), index="users")


@pytest.fixture
def user_service(search_client):
	return UserService(repository=InMemoryUserRepository(), search_client=search_client)


@pytest_asyncio.fixture
async def api_client(user_service):
	deps.set_user_service(user_service)
	deps.set_search_client(user_service.search_client)
	transport = ASGITransport(app=main.app)
	try:
		async with AsyncClient(transport=transport, base_url="http://testserver") as client:
			yield client
	finally:
		deps.set_user_service(None)
		deps.set_search_client(None)

"""Explicit wiring of the record store, search client and user service.

The service and the search client are built once per process and handed to
the routers through FastAPI dependencies; tests swap them with
``set_user_service`` and ``set_search_client``. The search client is wired
on its own so the search surface never builds the user service.
"""

from __future__ import annotations

from typing import Optional

from userhub.domain.users.repo import InMemoryUserRepository, PostgresUserRepository, UserRepository
from userhub.domain.users.service import UserService
from userhub.infra.memory_index import MemorySearchTransport
from userhub.infra.search_transport import HttpSearchTransport, SearchTransport
from userhub.search.clients import UserSearchClient
from userhub.settings import settings

_service: Optional[UserService] = None
_search_client: Optional[UserSearchClient] = None


def build_repository(backend: str | None = None) -> UserRepository:
	backend = (backend or settings.user_store_backend).lower()
	if backend == "memory":
		return InMemoryUserRepository()
	if backend == "postgres":
		return PostgresUserRepository()
	raise ValueError(f"unknown user store backend: {backend}")


def build_search_transport(backend: str | None = None) -> SearchTransport:
	backend = (backend or settings.search_backend).lower()
	if backend == "memory":
		return MemorySearchTransport()
	if backend in ("elasticsearch", "opensearch"):
		return HttpSearchTransport()
	raise ValueError(f"unknown search backend: {backend}")


def build_user_service() -> UserService:
	return UserService(repository=build_repository(), search_client=get_search_client())


def get_search_client() -> UserSearchClient:
	"""Return the process-wide search client; the search router uses it directly."""
	global _search_client
	if _search_client is None:
		_search_client = UserSearchClient(transport=build_search_transport())
	return _search_client


def set_search_client(client: Optional[UserSearchClient]) -> None:
	global _search_client
	_search_client = client


def get_user_service() -> UserService:
	global _service
	if _service is None:
		_service = build_user_service()
	return _service


def set_user_service(service: Optional[UserService]) -> None:
	global _service
	_service = service


async def shutdown() -> None:
	"""Close the search transport and forget the wired service and client."""
	global _service, _search_client
	if _search_client is not None:
		await _search_client.aclose()
	_search_client = None
	_service = None


__all__ = [
	"build_repository",
	"build_search_transport",
	"build_user_service",
	"get_search_client",
	"get_user_service",
	"set_search_client",
	"set_user_service",
	"shutdown",
]

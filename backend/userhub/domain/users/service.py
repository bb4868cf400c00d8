"""Service layer orchestrating user CRUD against the record store."""

from __future__ import annotations

import logging

from userhub.domain.users.exceptions import NotFoundError
from userhub.domain.users.models import User
from userhub.domain.users.repo import UserRepository
from userhub.obs import metrics as obs_metrics
from userhub.search.clients import UserSearchClient

_LOG = logging.getLogger(__name__)


class UserService:
	"""Coordinate user reads and writes.

	Every operation goes to the record store. The search client is held so the
	search surface can be wired from the same place, but no method here calls
	it: ``find_by_name`` is an exact store match and saves do not reach the
	index.
	"""

	def __init__(
		self,
		*,
		repository: UserRepository,
		search_client: UserSearchClient | None = None,
	) -> None:
		self.repository = repository
		self.search_client = search_client

	async def save(self, user: User) -> User:
		saved = await self.repository.save(user)
		obs_metrics.inc_user_write("save")
		_LOG.info("users.saved", extra={"user_id": saved.id})
		return saved

	async def update(self, user_id: int, user: User) -> User:
		current = await self.find_one(user_id)
		changed = current.model_copy(update={"name": user.name, "last_name": user.last_name})
		updated = await self.repository.save(changed)
		obs_metrics.inc_user_write("update")
		_LOG.info("users.updated", extra={"user_id": updated.id})
		return updated

	async def delete(self, user_id: int) -> None:
		await self.repository.delete_by_id(user_id)
		obs_metrics.inc_user_write("delete")
		_LOG.info("users.deleted", extra={"user_id": user_id})

	async def find_one(self, user_id: int) -> User:
		user = await self.repository.find_by_id(user_id)
		if user is None:
			raise NotFoundError()
		return user

	async def find_all(self) -> list[User]:
		return await self.repository.find_all()

	async def find_by_name(self, name: str) -> list[User]:
		return await self.repository.find_by_name(name)


__all__ = ["UserService"]

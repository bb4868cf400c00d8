"""Record store for users: the authoritative source of truth."""

from __future__ import annotations

import logging
from typing import Protocol

import asyncpg

from userhub.domain.users.models import User
from userhub.infra.postgres import get_pool

_LOG = logging.getLogger(__name__)

_COLUMNS = "id, name, last_name"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
	id BIGSERIAL PRIMARY KEY,
	name TEXT NOT NULL,
	last_name TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS users_name_idx ON users (name);
"""


class UserRepository(Protocol):
	"""Operations every record store backend provides.

	Each call is atomic for the single record it touches; nothing spans calls.
	"""

	async def save(self, user: User) -> User:
		...

	async def find_by_id(self, user_id: int) -> User | None:
		...

	async def find_all(self) -> list[User]:
		...

	async def find_by_name(self, name: str) -> list[User]:
		...

	async def delete_by_id(self, user_id: int) -> None:
		...


async def ensure_schema(pool: asyncpg.pool.Pool) -> None:
	async with pool.acquire() as conn:
		await conn.execute(SCHEMA_SQL)


class PostgresUserRepository:
	"""Thin data-access layer around asyncpg."""

	async def save(self, user: User) -> User:
		pool = await get_pool()
		async with pool.acquire() as conn:
			if user.id is None:
				record = await conn.fetchrow(
					f"""
					INSERT INTO users (name, last_name)
					VALUES ($1, $2)
					RETURNING {_COLUMNS}
					""",
					user.name,
					user.last_name,
				)
			else:
				record = await conn.fetchrow(
					f"""
					INSERT INTO users (id, name, last_name)
					VALUES ($1, $2, $3)
					ON CONFLICT (id) DO UPDATE SET name = EXCLUDED.name, last_name = EXCLUDED.last_name
					RETURNING {_COLUMNS}
					""",
					user.id,
					user.name,
					user.last_name,
				)
		saved = User.from_record(record)
		_LOG.debug("users.repo.saved", extra={"user_id": saved.id})
		return saved

	async def find_by_id(self, user_id: int) -> User | None:
		pool = await get_pool()
		async with pool.acquire() as conn:
			record = await conn.fetchrow(f"SELECT {_COLUMNS} FROM users WHERE id = $1", user_id)
		return User.from_record(record) if record else None

	async def find_all(self) -> list[User]:
		pool = await get_pool()
		async with pool.acquire() as conn:
			rows = await conn.fetch(f"SELECT {_COLUMNS} FROM users ORDER BY id")
		return [User.from_record(row) for row in rows]

	async def find_by_name(self, name: str) -> list[User]:
		# Plain equality: case-sensitive, no pattern or text matching.
		pool = await get_pool()
		async with pool.acquire() as conn:
			rows = await conn.fetch(f"SELECT {_COLUMNS} FROM users WHERE name = $1 ORDER BY id", name)
		return [User.from_record(row) for row in rows]

	async def delete_by_id(self, user_id: int) -> None:
		pool = await get_pool()
		async with pool.acquire() as conn:
			await conn.execute("DELETE FROM users WHERE id = $1", user_id)


class InMemoryUserRepository:
	"""Dict-backed store for local development and tests.

	Records are copied on the way in and out so callers never hold a reference
	to stored state.
	"""

	def __init__(self) -> None:
		self._rows: dict[int, User] = {}
		self._next_id = 1

	async def save(self, user: User) -> User:
		if user.id is None:
			user_id = self._next_id
		else:
			user_id = user.id
		self._next_id = max(self._next_id, user_id + 1)
		stored = user.model_copy(update={"id": user_id})
		self._rows[user_id] = stored
		return stored.model_copy()

	async def find_by_id(self, user_id: int) -> User | None:
		row = self._rows.get(user_id)
		return row.model_copy() if row else None

	async def find_all(self) -> list[User]:
		return [row.model_copy() for row in self._rows.values()]

	async def find_by_name(self, name: str) -> list[User]:
		return [row.model_copy() for row in self._rows.values() if row.name == name]

	async def delete_by_id(self, user_id: int) -> None:
		self._rows.pop(user_id, None)


__all__ = ["InMemoryUserRepository", "PostgresUserRepository", "UserRepository", "ensure_schema"]

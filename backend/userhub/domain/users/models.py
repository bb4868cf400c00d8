"""Domain model for the user record."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
	"""A user as held by the record store or the search index.

	``id`` is assigned by the store on first save and never changes afterwards.
	The wire and index key for ``last_name`` is ``lastName``.
	"""

	id: Optional[int] = None
	name: str
	last_name: str = Field(..., alias="lastName")

	model_config = ConfigDict(from_attributes=True, populate_by_name=True)

	@classmethod
	def from_record(cls, record: Mapping[str, Any]) -> User:
		return cls(id=record["id"], name=record["name"], last_name=record["last_name"])

	def to_document(self) -> dict[str, Any]:
		return self.model_dump(by_alias=True)

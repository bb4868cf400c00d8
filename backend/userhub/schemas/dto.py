"""Pydantic schemas for the user API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from userhub.domain.users.models import User


class UserRequest(BaseModel):
	id: Optional[int] = None
	name: str
	last_name: str = Field(..., alias="lastName")

	model_config = ConfigDict(populate_by_name=True)

	def to_user(self) -> User:
		return User(id=self.id, name=self.name, last_name=self.last_name)


class UserResponse(BaseModel):
	id: Optional[int] = None
	name: str
	last_name: str = Field(..., alias="lastName")

	model_config = ConfigDict(from_attributes=True, populate_by_name=True)

	@classmethod
	def from_user(cls, user: User) -> UserResponse:
		return cls(id=user.id, name=user.name, last_name=user.last_name)

"""Custom exceptions for user services."""

from __future__ import annotations

from fastapi import status


class UserError(Exception):
	"""Base class for user related errors."""

	status_code: int = status.HTTP_400_BAD_REQUEST
	detail: str = "user_error"

	def __init__(self, detail: str | None = None) -> None:
		super().__init__(detail or self.detail)
		if detail:
			self.detail = detail


class NotFoundError(UserError):
	"""Raised when no record exists for the requested id."""

	status_code = status.HTTP_404_NOT_FOUND
	detail = "user_not_found"

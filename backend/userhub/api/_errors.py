"""Error translation helpers for the user API."""

from __future__ import annotations

from fastapi import HTTPException, status

from userhub.domain.users import exceptions
from userhub.search import exceptions as search_exceptions


def to_http_error(exc: Exception) -> HTTPException:
	"""Translate domain exceptions to FastAPI HTTP errors."""
	if isinstance(exc, exceptions.UserError):
		return HTTPException(status_code=exc.status_code, detail=exc.detail)
	if isinstance(exc, search_exceptions.SearchError):
		return HTTPException(status_code=exc.status_code, detail=exc.detail)
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal_error")

"""Custom exceptions for user search operations."""

from __future__ import annotations


class SearchError(Exception):
	"""Base class for user search errors."""

	def __init__(self, detail: str, *, status_code: int = 400) -> None:
		super().__init__(detail)
		self.detail = detail
		self.status_code = status_code


class SearchUnavailable(SearchError):
	"""Raised when the search transport is unreachable or answers with garbage."""

	def __init__(self, detail: str = "search_unavailable", *, status_code: int = 503) -> None:
		super().__init__(detail, status_code=status_code)

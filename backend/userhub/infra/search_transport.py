"""HTTP transport for an Elasticsearch/OpenSearch compatible search API."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from userhub.settings import settings

_LOG = logging.getLogger(__name__)
_INDEX_NOT_FOUND = "index_not_found_exception"
_EMPTY_RESPONSE: dict[str, Any] = {"hits": {"total": {"value": 0, "relation": "eq"}, "hits": []}}


class SearchTransport(Protocol):
	"""Interface shared by the HTTP and in-memory transports."""

	async def search(self, *, index: str, body: dict[str, Any]) -> dict[str, Any]:
		...

	async def aclose(self) -> None:
		...


def _is_missing_index(response: httpx.Response) -> bool:
	if response.status_code != 404:
		return False
	try:
		payload = response.json()
	except ValueError:
		return False
	error = payload.get("error") if isinstance(payload, dict) else None
	return isinstance(error, dict) and error.get("type") == _INDEX_NOT_FOUND


class HttpSearchTransport:
	"""Thin async wrapper issuing ``_search`` requests over httpx.

	Raises ``httpx.HTTPError`` on connection failures and non-2xx statuses and
	``ValueError`` when the body is not JSON. A missing index is reported as an
	empty result since the index is created by an external pipeline.
	"""

	def __init__(
		self,
		*,
		base_url: str | None = None,
		timeout: float | None = None,
		client: httpx.AsyncClient | None = None,
	) -> None:
		self._client = client or httpx.AsyncClient(
			base_url=base_url or settings.search_base_url,
			timeout=timeout if timeout is not None else settings.search_timeout_seconds,
		)

	async def search(self, *, index: str, body: dict[str, Any]) -> dict[str, Any]:
		response = await self._client.post(f"/{index}/_search", json=body)
		if _is_missing_index(response):
			_LOG.info("search_transport.index_missing", extra={"index": index})
			return dict(_EMPTY_RESPONSE)
		response.raise_for_status()
		return response.json()

	async def aclose(self) -> None:
		await self._client.aclose()


__all__ = ["HttpSearchTransport", "SearchTransport"]

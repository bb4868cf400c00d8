"""Read-only client for the externally maintained user index."""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping

from pydantic import ValidationError

from userhub.domain.users.models import User
from userhub.infra.search_transport import HttpSearchTransport, SearchTransport
from userhub.obs import metrics as obs_metrics
from userhub.search import builders, exceptions
from userhub.settings import settings

_LOG = logging.getLogger(__name__)
_NAME_KIND = "users:name_term"


class UserSearchClient:
	"""Term lookups against the user index.

	Issues one request per call and never retries; failures surface as
	``SearchUnavailable``. The index is only ever read here.
	"""

	def __init__(
		self,
		*,
		transport: SearchTransport | None = None,
		index: str | None = None,
		size: int | None = None,
	) -> None:
		self._transport = transport or HttpSearchTransport()
		self._index = index if index is not None else settings.search_index
		self._size = size if size is not None else settings.search_result_size

	async def query_by_name(self, text: str) -> list[User]:
		payload = builders.build_name_term_query(text, size=self._size)
		obs_metrics.inc_search_query(_NAME_KIND)
		started = time.perf_counter()
		try:
			response = await self._execute_search(body=payload)
			return self._parse_hits(response)
		finally:
			obs_metrics.observe_search_latency(_NAME_KIND, time.perf_counter() - started)

	async def aclose(self) -> None:
		await self._transport.aclose()

	async def _execute_search(self, *, body: dict[str, Any]) -> dict[str, Any]:
		try:
			return await self._transport.search(index=self._index, body=body)
		except Exception as exc:
			_LOG.warning(
				"users.search.backend_failure",
				extra={"index": self._index, "error": exc.__class__.__name__},
			)
			raise exceptions.SearchUnavailable() from exc

	def _parse_hits(self, response: Any) -> list[User]:
		if not isinstance(response, Mapping):
			raise self._malformed("response_not_object")
		outer = response.get("hits")
		if not isinstance(outer, Mapping) or not isinstance(outer.get("hits"), list):
			raise self._malformed("hits_missing")
		users: list[User] = []
		for hit in outer["hits"]:
			source = hit.get("_source") if isinstance(hit, Mapping) else None
			if not isinstance(source, Mapping):
				raise self._malformed("source_missing")
			document = dict(source)
			# generated ids are opaque strings; only numeric ones identify a record
			hit_id = hit.get("_id")
			if document.get("id") is None and hit_id is not None and str(hit_id).isdigit():
				document["id"] = hit_id
			try:
				users.append(User.model_validate(document))
			except ValidationError as exc:
				raise self._malformed("source_invalid") from exc
		return users

	def _malformed(self, reason: str) -> exceptions.SearchUnavailable:
		_LOG.warning("users.search.malformed_response", extra={"index": self._index, "reason": reason})
		return exceptions.SearchUnavailable()


__all__ = ["UserSearchClient"]

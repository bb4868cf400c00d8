"""In-memory search index simulation used by tests and local development.

Stands in for the externally populated user index. Only ``term`` and
``match_all`` queries are understood; ``term`` compares values by exact
string equality, the way a keyword field behaves.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

_LOG = logging.getLogger(__name__)
_INDEX_STORAGE: dict[str, dict[str, dict[str, Any]]] = {}


async def index_documents(index: str, documents: Iterable[dict[str, Any]]) -> None:
	"""Store documents under ``index``, replacing any with the same ``id``."""

	batch = list(documents)
	if not batch:
		return
	bucket = _INDEX_STORAGE.setdefault(index, {})
	for document in batch:
		payload = dict(document)
		doc_id = payload.get("id")
		key = str(doc_id) if doc_id is not None else f"_auto{len(bucket)}"
		bucket[key] = payload
	_LOG.info("memory_index.index_documents", extra={"index": index, "count": len(batch)})


def _term_value(term: dict[str, Any]) -> tuple[str, Any]:
	field, condition = next(iter(term.items()))
	if isinstance(condition, dict):
		return field, condition.get("value")
	return field, condition


def _matches(document: dict[str, Any], query: dict[str, Any]) -> bool:
	if not query or "match_all" in query:
		return True
	term = query.get("term")
	if term:
		field, value = _term_value(term)
		return field in document and str(document[field]) == str(value)
	return False


async def search(*, index: str, body: dict[str, Any]) -> dict[str, Any]:
	"""Evaluate ``body`` against the stored documents of ``index``."""

	documents = _INDEX_STORAGE.get(index, {})
	query = body.get("query", {})
	hits = [
		{"_index": index, "_id": key, "_score": 1.0, "_source": dict(doc)}
		for key, doc in documents.items()
		if _matches(doc, query)
	]
	limit = body.get("size")
	if limit is None:
		limit = 10
	return {"hits": {"total": {"value": len(hits), "relation": "eq"}, "hits": hits[:limit]}}


def reset_state() -> None:
	"""Drop every stored document (test helper)."""

	_INDEX_STORAGE.clear()


class MemorySearchTransport:
	"""Adapter exposing the module functions with the transport interface."""

	async def search(self, *, index: str, body: dict[str, Any]) -> dict[str, Any]:
		return await search(index=index, body=body)

	async def aclose(self) -> None:
		return None


__all__ = ["MemorySearchTransport", "index_documents", "reset_state", "search"]

"""Query builders for the user index."""

from __future__ import annotations

from typing import Any

NAME_FIELD = "name"


def build_name_term_query(text: str, *, size: int) -> dict[str, Any]:
	"""Return a single term-equality query on the ``name`` field."""

	return {
		"size": size,
		"query": {"term": {NAME_FIELD: {"value": text}}},
	}

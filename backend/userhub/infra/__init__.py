"""Infrastructure helpers: database pool and search transports."""

from . import memory_index, postgres, search_transport  # noqa: F401

__all__ = [
	"memory_index",
	"postgres",
	"search_transport",
]

"""Search-index lookups for users."""

from userhub.search.clients import UserSearchClient

__all__ = ["UserSearchClient"]

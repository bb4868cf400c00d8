"""Search-index lookups, routed straight to the search client."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from userhub.api._errors import to_http_error
from userhub.deps import get_search_client
from userhub.schemas import dto
from userhub.search.clients import UserSearchClient
from userhub.search.exceptions import SearchError

router = APIRouter(prefix="/user-resource", tags=["users:search"])


@router.get("/{name}", response_model=List[dto.UserResponse])
async def search_by_name_endpoint(
	name: str,
	client: UserSearchClient = Depends(get_search_client),
) -> List[dto.UserResponse]:
	try:
		users = await client.query_by_name(name)
	except SearchError as exc:
		raise to_http_error(exc) from exc
	return [dto.UserResponse.from_user(user) for user in users]

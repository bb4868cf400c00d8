import pytest

from userhub.domain.users.models import User
from userhub.infra import memory_index
from userhub.search import builders
from userhub.search import exceptions as search_exceptions
from userhub.search.clients import UserSearchClient


class _StubTransport:
	def __init__(self, response=None, error: Exception | None = None):
		self.response = response
		self.error = error
		self.calls: list[tuple[str, dict]] = []

	async def search(self, *, index: str, body: dict):
		self.calls.append((index, body))
		if self.error is not None:
			raise self.error
		return self.response

	async def aclose(self) -> None:
		return None


def test_build_name_term_query():
	body = builders.build_name_term_query("Ann", size=10)

	assert body == {"size": 10, "query": {"term": {"name": {"value": "Ann"}}}}


@pytest.mark.asyncio
async def test_query_by_name_maps_term_hits(search_client):
	await memory_index.index_documents(
		"users",
		[
			{"id": 1, "name": "Ann", "lastName": "Lee"},
			{"id": 2, "name": "Bo", "lastName": "Kim"},
		],
	)

	users = await search_client.query_by_name("Ann")

	assert users == [User(id=1, name="Ann", last_name="Lee")]


@pytest.mark.asyncio
async def test_query_by_name_empty_index_returns_empty(search_client):
	assert await search_client.query_by_name("Ann") == []


@pytest.mark.asyncio
async def test_query_by_name_issues_single_request_against_users_index():
	transport = _StubTransport(response={"hits": {"hits": []}})
	client = UserSearchClient(transport=transport, index="users", size=5)

	assert await client.query_by_name("Ann") == []
	assert transport.calls == [("users", {"size": 5, "query": {"term": {"name": {"value": "Ann"}}}})]


@pytest.mark.asyncio
async def test_query_by_name_falls_back_to_hit_id():
	transport = _StubTransport(response={"hits": {"hits": [{"_id": "42", "_source": {"name": "Ann", "lastName": "Lee"}}]}})
	client = UserSearchClient(transport=transport, index="users")

	users = await client.query_by_name("Ann")

	assert users[0].id == 42


@pytest.mark.asyncio
async def test_query_by_name_ignores_generated_hit_id():
	transport = _StubTransport(response={"hits": {"hits": [{"_id": "Xk3aYo4BQn", "_source": {"name": "Ann", "lastName": "Lee"}}]}})
	client = UserSearchClient(transport=transport, index="users")

	users = await client.query_by_name("Ann")

	assert users == [User(id=None, name="Ann", last_name="Lee")]


@pytest.mark.asyncio
async def test_query_by_name_reads_documents_indexed_without_id(search_client):
	await memory_index.index_documents("users", [{"name": "Ann", "lastName": "Lee"}])

	users = await search_client.query_by_name("Ann")

	assert [(user.id, user.last_name) for user in users] == [(None, "Lee")]


@pytest.mark.asyncio
async def test_explicit_zero_size_is_sent_as_is():
	transport = _StubTransport(response={"hits": {"hits": []}})
	client = UserSearchClient(transport=transport, index="users", size=0)

	await client.query_by_name("Ann")

	assert transport.calls[0][1]["size"] == 0


@pytest.mark.asyncio
async def test_memory_index_honours_zero_size():
	await memory_index.index_documents("users", [{"id": 1, "name": "Ann", "lastName": "Lee"}])

	response = await memory_index.search(index="users", body={"size": 0, "query": {"term": {"name": "Ann"}}})

	assert response["hits"]["hits"] == []
	assert response["hits"]["total"]["value"] == 1


@pytest.mark.asyncio
async def test_transport_failure_raises_search_unavailable():
	transport = _StubTransport(error=ConnectionError("refused"))
	client = UserSearchClient(transport=transport, index="users")

	with pytest.raises(search_exceptions.SearchUnavailable) as excinfo:
		await client.query_by_name("Ann")

	assert excinfo.value.status_code == 503
	assert excinfo.value.detail == "search_unavailable"
	assert isinstance(excinfo.value.__cause__, ConnectionError)
	assert len(transport.calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
	"response",
	[
		None,
		{},
		{"hits": {}},
		{"hits": {"hits": [{"_id": "1"}]}},
		{"hits": {"hits": [{"_id": "1", "_source": {"lastName": "Lee"}}]}},
	],
)
async def test_malformed_response_raises_search_unavailable(response):
	client = UserSearchClient(transport=_StubTransport(response=response), index="users")

	with pytest.raises(search_exceptions.SearchUnavailable):
		await client.query_by_name("Ann")


@pytest.mark.asyncio
async def test_saved_user_is_found_by_store_but_not_by_index(user_service, search_client):
	saved = await user_service.save(User(name="Ann", last_name="Lee"))

	store_hits = await user_service.find_by_name("Ann")
	index_hits = await search_client.query_by_name("Ann")

	assert [user.id for user in store_hits] == [saved.id]
	assert index_hits == []


@pytest.mark.asyncio
async def test_index_serves_stale_copy_after_store_update(user_service, search_client):
	saved = await user_service.save(User(name="Ann", last_name="Lee"))
	# external pipeline indexes the record once
	await memory_index.index_documents("users", [saved.to_document()])

	await user_service.update(saved.id, User(name="Ann", last_name="Park"))

	from_store = await user_service.find_one(saved.id)
	from_index = await search_client.query_by_name("Ann")
	assert from_store.last_name == "Park"
	assert [user.last_name for user in from_index] == ["Lee"]
	assert from_index[0].id == from_store.id

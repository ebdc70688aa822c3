"""PostService — command/query layer against an in-memory repository.

Tests:
    - Mutations check the AuthContext before any store call
    - list() rejects bad pages before any store call
    - Last-Page counts the whole collection unless count_filtered
    - read/update of a missing id raise PostNotFoundError; delete does not
"""

import pytest

from blog.core.domain_types import AuthContext
from blog.core.errors import InvalidPageError, NotAuthenticatedError, PostNotFoundError
from blog.services.post_service import PostService
from tests.services.fake_post_repository import FakePostRepository

ADMIN = AuthContext(logged_in=True)
ANON = AuthContext(logged_in=False)
MISSING_ID = "5b0f5e6d1c9d440000a1b2c3"


@pytest.fixture
def repo():
    return FakePostRepository()


@pytest.fixture
def service(repo):
    return PostService(repo)


async def _create_many(service, n, **fields):
    return [
        await service.create(
            ADMIN, fields.get("title", f"T{i}"), fields.get("body", "B"),
            fields.get("tags", []),
        )
        for i in range(n)
    ]


async def test_create_returns_stored_post(service, repo):
    post = await service.create(ADMIN, "T", "B", ["a"])
    assert post["id"] in repo.posts
    assert (post["title"], post["body"], post["tags"]) == ("T", "B", ["a"])


@pytest.mark.parametrize("operation", ["create", "update", "delete"])
async def test_mutations_rejected_before_store_when_logged_out(
    service, repo, operation,
):
    with pytest.raises(NotAuthenticatedError):
        if operation == "create":
            await service.create(ANON, "T", "B", [])
        elif operation == "update":
            await service.update(ANON, MISSING_ID, {"title": "x"})
        else:
            await service.delete(ANON, MISSING_ID)
    assert repo.calls == []


async def test_unenforced_context_allows_writes(service):
    post = await service.create(AuthContext(logged_in=False, enforced=False), "T", "B", [])
    assert post["id"]


async def test_list_bad_page_never_touches_store(service, repo):
    with pytest.raises(InvalidPageError):
        await service.list(0)
    assert repo.calls == []


async def test_list_pages_newest_first(service):
    created = await _create_many(service, 15)

    first = await service.list(1)
    second = await service.list(2)

    assert [p["id"] for p in first.posts] == [p["id"] for p in reversed(created)][:10]
    assert len(second.posts) == 5
    assert first.last_page == second.last_page == 2


async def test_list_returns_excerpts(service):
    await service.create(ADMIN, "T", "q" * 400, [])
    page = await service.list()
    assert page.posts[0]["body"] == "q" * 350 + "..."


async def test_last_page_ignores_tag_by_default(service):
    await _create_many(service, 11, tags=["common"])
    await service.create(ADMIN, "T", "B", ["rare"])

    page = await service.list(1, "rare")

    assert len(page.posts) == 1
    assert page.last_page == 2


async def test_last_page_counts_filtered_when_configured(repo):
    service = PostService(repo, count_filtered=True)
    await _create_many(service, 11, tags=["common"])
    await service.create(ADMIN, "T", "B", ["rare"])

    page = await service.list(1, "rare")

    assert page.last_page == 1


async def test_empty_tag_lists_every_post(repo):
    service = PostService(repo, count_filtered=True)
    await _create_many(service, 3, tags=["a"])

    page = await service.list(1, "")

    assert len(page.posts) == 3
    assert page.last_page == 1


async def test_read_missing_raises_not_found(service):
    with pytest.raises(PostNotFoundError):
        await service.read(MISSING_ID)


async def test_update_merges_submitted_fields(service):
    post = await service.create(ADMIN, "T", "B", ["a"])
    updated = await service.update(ADMIN, post["id"], {"body": "new", "id": "ignored"})
    assert updated["id"] == post["id"]
    assert updated["title"] == "T"
    assert updated["body"] == "new"
    assert updated["tags"] == ["a"]


async def test_update_missing_raises_not_found(service):
    with pytest.raises(PostNotFoundError):
        await service.update(ADMIN, MISSING_ID, {"title": "x"})


async def test_delete_reports_whether_post_existed(service):
    post = await service.create(ADMIN, "T", "B", [])
    assert await service.delete(ADMIN, post["id"]) is True
    assert await service.delete(ADMIN, post["id"]) is False

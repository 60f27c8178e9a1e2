"""Unit tests for the in-memory post repository."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from folio.domain.repository import (
    PostChanges,
    PostFilter,
    PostQuery,
    PostRepository,
    PostSort,
    PostSortField,
)
from folio.domain.value import PostId, SortDirection, TagId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestInMemoryPostRepository:
    """Tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_update_partial(self, unit_env):
        """Only supplied fields change; updated_at moves forward."""
        # Arrange
        repo = await unit_env.get(PostRepository)
        post = await repo.save(make_post(created_at=datetime(2024, 1, 1)))

        # Act
        updated = await repo.update(post.id, PostChanges(title="Renamed"))

        # Assert
        assert updated.title == "Renamed"
        assert updated.description == post.description
        assert updated.created_at == post.created_at
        assert updated.updated_at > post.updated_at

    @pytest.mark.asyncio
    async def test_update_and_delete_missing(self, unit_env):
        """Missing posts update to None and delete to False."""
        repo = await unit_env.get(PostRepository)
        missing = PostId(uuid4())

        assert await repo.update(missing, PostChanges(title="x")) is None
        assert await repo.delete(missing) is False

    @pytest.mark.asyncio
    async def test_ties_broken_by_id(self, unit_env):
        """Equal sort keys are ordered by ID in the same direction."""
        # Arrange
        repo = await unit_env.get(PostRepository)
        same_time = datetime(2024, 1, 1)
        posts = [await repo.save(make_post(created_at=same_time)) for _ in range(3)]

        # Act
        desc = await repo.find_all(PostQuery())
        asc = await repo.find_all(PostQuery(sort=PostSort(direction=SortDirection.ASC)))

        # Assert
        ids = sorted(post.id for post in posts)
        assert [post.id for post in asc] == ids
        assert [post.id for post in desc] == list(reversed(ids))

    @pytest.mark.asyncio
    async def test_sort_by_updated_at(self, unit_env):
        """Posts can be ordered by last update."""
        # Arrange
        repo = await unit_env.get(PostRepository)
        start = datetime(2024, 1, 1)
        older = await repo.save(make_post(title="Older", created_at=start))
        await repo.save(make_post(title="Newer", created_at=start + timedelta(days=1)))
        await repo.update(older.id, PostChanges(description="Edited"))

        # Act
        posts = await repo.find_all(
            PostQuery(sort=PostSort(field=PostSortField.UPDATED_AT))
        )

        # Assert
        assert [post.title for post in posts] == ["Older", "Newer"]

    @pytest.mark.asyncio
    async def test_filter_and_count(self, unit_env):
        """Tag and text filters combine; count ignores the page window."""
        # Arrange
        repo = await unit_env.get(PostRepository)
        tag = TagId(uuid4())
        await repo.save(make_post(title="Paris by night", tag_ids=[tag]))
        await repo.save(make_post(title="Paris by day"))
        await repo.save(make_post(title="Lyon", tag_ids=[tag]))
        post_filter = PostFilter(tag_ids=frozenset({tag}), text="paris")

        # Act
        page = await repo.find_all(PostQuery(filter=post_filter, limit=1))
        total = await repo.count(post_filter)

        # Assert
        assert [post.title for post in page] == ["Paris by night"]
        assert total == 1
        assert await repo.count(PostFilter(tag_ids=frozenset())) == 0

"""Unit tests for PostQueryService."""

import pytest

from folio.domain.error import ValidationError
from folio.domain.repository import PostSortField, TagRepository
from folio.domain.service import PostQueryService
from folio.domain.service.query_service import parse_positive_int
from folio.domain.value import SortDirection
from tests.conftest import make_post, make_tag
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestParsePositiveInt:
    """Tests for page/limit parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [(None, 7), ("3", 3), (4, 4), (" 2 ", 2), ("0", 7), ("-1", 7), ("abc", 7), ("1.5", 7)],
    )
    def test_parse(self, raw, expected):
        """Only positive integers are accepted; everything else is the default."""
        assert parse_positive_int(raw, 7) == expected


class TestBuildListing:
    """Tests for build_listing."""

    @pytest.mark.asyncio
    async def test_defaults(self, unit_env):
        """No parameters: first page of 10, newest first, no tag restriction."""
        # Arrange
        query_service = await unit_env.get(PostQueryService)

        # Act
        query = await query_service.build_listing()

        # Assert
        assert query.page == 1
        assert query.limit == 10
        assert query.skip == 0
        assert query.sort.field == PostSortField.CREATED_AT
        assert query.sort.direction == SortDirection.DESC
        assert query.filter.tag_ids is None

    @pytest.mark.asyncio
    async def test_skip_from_page_and_limit(self, unit_env):
        """skip = (page - 1) * limit."""
        query_service = await unit_env.get(PostQueryService)

        query = await query_service.build_listing(page="3", limit="5")

        assert query.skip == 10
        assert query.limit == 5

    @pytest.mark.asyncio
    async def test_invalid_page_and_limit_fall_back(self, unit_env):
        """Non-positive or non-numeric values use the defaults."""
        query_service = await unit_env.get(PostQueryService)

        query = await query_service.build_listing(page="0", limit="lots")

        assert query.page == 1
        assert query.limit == 10

    @pytest.mark.asyncio
    async def test_sort_parameters(self, unit_env):
        """sortBy and sortOrder are parsed."""
        query_service = await unit_env.get(PostQueryService)

        query = await query_service.build_listing(sort_by="title", sort_order="asc")

        assert query.sort.field == PostSortField.TITLE
        assert query.sort.direction == SortDirection.ASC

    @pytest.mark.asyncio
    async def test_tag_slugs_resolve_to_ids(self, unit_env):
        """Known slugs become the tag ID set; unknown ones are dropped."""
        # Arrange
        query_service = await unit_env.get(PostQueryService)
        tag_repo = await unit_env.get(TagRepository)
        travel = await tag_repo.save(make_tag("Travel"))
        food = await tag_repo.save(make_tag("Food"))

        # Act
        query = await query_service.build_listing(tag_slugs="travel, food ,nope")

        # Assert
        assert query.filter.tag_ids == frozenset({travel.id, food.id})

    @pytest.mark.asyncio
    async def test_unknown_tags_match_nothing(self, unit_env):
        """A tag filter naming no existing tag matches no post."""
        # Arrange
        query_service = await unit_env.get(PostQueryService)

        # Act
        query = await query_service.build_listing(tag_slugs="nope,Not A Slug")

        # Assert
        assert query.filter.tag_ids == frozenset()
        assert not query.filter.matches(make_post())

    @pytest.mark.asyncio
    async def test_empty_tags_mean_no_restriction(self, unit_env):
        """An empty tags parameter doesn't filter."""
        query_service = await unit_env.get(PostQueryService)

        query = await query_service.build_listing(tag_slugs="")

        assert query.filter.tag_ids is None


class TestBuildSearch:
    """Tests for build_search."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, ""])
    async def test_query_is_required(self, unit_env, text):
        """Missing or empty search text is rejected."""
        query_service = await unit_env.get(PostQueryService)

        with pytest.raises(ValidationError, match="Search query is required"):
            query_service.build_search(text)

    @pytest.mark.asyncio
    async def test_search_query(self, unit_env):
        """Search filters by text, newest first, with its own pagination."""
        # Arrange
        query_service = await unit_env.get(PostQueryService)

        # Act
        query = query_service.build_search("Paris", page="2", limit="x")

        # Assert
        assert query.filter.text == "Paris"
        assert query.filter.tag_ids is None
        assert query.sort.field == PostSortField.CREATED_AT
        assert query.sort.direction == SortDirection.DESC
        assert query.page == 2
        assert query.limit == 10
        assert query.skip == 10

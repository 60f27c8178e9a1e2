"""End-to-end tests for the posts API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from folio.domain.service import MAX_IMAGE_BYTES
from folio.interface.api.app import create_app
from folio.util.di.container import setup_di
from tests.conftest import PNG_BYTES
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def create_post(client, title="Trip to Paris", description="Cafés and museums", tags=None):
    """Create a post through the API and return its data."""
    data = {"title": title, "description": description}
    if tags is not None:
        data["tags"] = tags
    response = client.post(
        "/api/posts",
        data=data,
        files={"image": ("photo.png", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreatePost:
    """POST /api/posts."""

    def test_create_post(self, client):
        """A valid multipart form creates the post."""
        # Act
        response = client.post(
            "/api/posts",
            data={"title": "Trip to Paris", "description": "Cafés", "tags": "Travel, Food"},
            files={"image": ("photo.png", PNG_BYTES, "image/png")},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Post created successfully"
        post = body["data"]
        assert post["title"] == "Trip to Paris"
        assert post["imageUrl"].startswith("https://res.cloudinary.com/")
        assert "createdAt" in post and "updatedAt" in post
        assert [tag["slug"] for tag in post["tags"]] == ["travel", "food"]
        assert set(post["tags"][0]) == {"id", "name", "slug"}
        assert "pagination" not in body

    def test_repeated_tags_field_is_a_list(self, client):
        """Sending tags several times passes a list of names."""
        post = create_post(client, tags=["Street Art", "Design"])

        assert [tag["name"] for tag in post["tags"]] == ["Street Art", "Design"]

    def test_missing_image(self, client):
        """A post needs an image."""
        # Act
        response = client.post(
            "/api/posts", data={"title": "Trip", "description": "Desc"}
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Image is required"}

    def test_non_image_file(self, client):
        """Only images are accepted."""
        response = client.post(
            "/api/posts",
            data={"title": "Trip", "description": "Desc"},
            files={"image": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Only image files are allowed"

    def test_oversized_image(self, client):
        """Images over 5 MiB are rejected and nothing is stored."""
        # Act
        response = client.post(
            "/api/posts",
            data={"title": "Trip", "description": "Desc"},
            files={"image": ("huge.png", b"\x00" * (MAX_IMAGE_BYTES + 1), "image/png")},
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Image size must be less than 5MB",
        }
        assert client.get("/api/posts").json()["pagination"]["total"] == 0

    def test_missing_title(self, client):
        """Title and description are required."""
        response = client.post(
            "/api/posts",
            data={"description": "Desc"},
            files={"image": ("photo.png", PNG_BYTES, "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Title and description are required"


class TestListPosts:
    """GET /api/posts."""

    def test_empty_listing(self, client):
        """No posts gives an empty page with pagination."""
        # Act
        response = client.get("/api/posts")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == []
        assert body["pagination"] == {"page": 1, "limit": 10, "total": 0, "pages": 0}

    def test_listing_with_filters(self, client):
        """Tag filter, sorting and paging are applied."""
        # Arrange
        create_post(client, title="Bravo", tags="Travel")
        create_post(client, title="Alpha", tags="Travel, Food")
        create_post(client, title="Charlie", tags="Food")

        # Act
        response = client.get(
            "/api/posts",
            params={"tags": "travel", "sortBy": "title", "sortOrder": "asc", "limit": "1"},
        )

        # Assert
        body = response.json()
        assert [post["title"] for post in body["data"]] == ["Alpha"]
        assert body["pagination"] == {"page": 1, "limit": 1, "total": 2, "pages": 2}

    def test_bad_paging_values_fall_back(self, client):
        """Invalid page and limit use the defaults."""
        response = client.get("/api/posts", params={"page": "-1", "limit": "abc"})

        assert response.status_code == 200
        assert response.json()["pagination"]["page"] == 1
        assert response.json()["pagination"]["limit"] == 10


class TestGetPost:
    """GET /api/posts/{id}."""

    def test_get_post(self, client):
        """An existing post is returned with its tags."""
        created = create_post(client, tags="Travel")

        response = client.get(f"/api/posts/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"] == created

    @pytest.mark.parametrize("post_id", [str(uuid4()), "not-a-uuid"])
    def test_unknown_post(self, client, post_id):
        """Unknown and malformed IDs are both 404."""
        response = client.get(f"/api/posts/{post_id}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Post not found"}


class TestUpdatePost:
    """PUT /api/posts/{id}."""

    def test_update_fields(self, client):
        """Supplied fields change, the rest are kept."""
        # Arrange
        created = create_post(client, tags="Travel")

        # Act
        response = client.put(
            f"/api/posts/{created['id']}",
            data={"title": "Renamed", "tags": "Food"},
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Post updated successfully"
        assert body["data"]["title"] == "Renamed"
        assert body["data"]["description"] == created["description"]
        assert body["data"]["imageUrl"] == created["imageUrl"]
        assert [tag["name"] for tag in body["data"]["tags"]] == ["Food"]

    def test_replace_image(self, client):
        """A new image replaces the old URL."""
        created = create_post(client)

        response = client.put(
            f"/api/posts/{created['id']}",
            files={"image": ("new.jpg", PNG_BYTES, "image/jpeg")},
        )

        assert response.status_code == 200
        assert response.json()["data"]["imageUrl"] != created["imageUrl"]

    def test_unknown_post(self, client):
        """Updating a missing post is 404."""
        response = client.put(f"/api/posts/{uuid4()}", data={"title": "New"})

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"


class TestDeletePost:
    """DELETE /api/posts/{id}."""

    def test_delete_post(self, client):
        """A deleted post is gone."""
        # Arrange
        created = create_post(client)

        # Act
        response = client.delete(f"/api/posts/{created['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Post deleted successfully"}
        assert client.get(f"/api/posts/{created['id']}").status_code == 404

    def test_delete_unknown_post(self, client):
        """Deleting a missing post is 404."""
        response = client.delete(f"/api/posts/{uuid4()}")

        assert response.status_code == 404


class TestRouting:
    """Requests that match no route."""

    def test_unknown_route(self, client):
        """Unmatched paths get the failure envelope."""
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Route not found"}

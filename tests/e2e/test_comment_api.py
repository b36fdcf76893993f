"""End-to-end tests for article comment endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from leaf.config import CommentSettings, Settings
from leaf.domain.service import JWTService
from leaf.domain.value import UserRole
from leaf.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def jwt_service():
    """JWT service using the same settings as the app."""
    return JWTService(auth_settings=Settings().auth)


def login(client, jwt_service, handle: str, role: UserRole = UserRole.USER) -> str:
    """Set the auth cookie for a new user and return their ID."""
    user_id = str(uuid4())
    client.cookies.set("auth_token", jwt_service.create_token(user_id, handle, role))
    return user_id


def post_comment(client, article_id: str, content: str, **extra) -> dict:
    response = client.post(
        "/blog/comments",
        json={"article_id": article_id, "content": content, **extra},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestArticleComments:
    """Comment listing and creation."""

    def test_empty_article(self, client):
        """An article without comments returns an empty page."""
        response = client.get(f"/blog/articles/{uuid4()}/comments")

        assert response.status_code == 200
        data = response.json()
        assert data["comments"] == []
        assert data["total"] == 0
        assert data["page"] == 1
        assert data["limit"] == 20

    def test_create_requires_auth(self, client):
        """Anonymous users cannot comment."""
        response = client.post(
            "/blog/comments", json={"article_id": str(uuid4()), "content": "Hi"}
        )

        assert response.status_code == 401

    def test_thread_round_trip(self, client, jwt_service):
        """Created replies show up nested under their parent."""
        # Arrange
        article_id = str(uuid4())
        alice_id = login(client, jwt_service, "alice")
        root = post_comment(client, article_id, "First!")
        login(client, jwt_service, "bob")
        reply = post_comment(
            client,
            article_id,
            "Welcome",
            parent_id=root["comment_id"],
            reply_to_user_id=alice_id,
        )
        client.cookies.clear()

        # Act
        response = client.get(f"/blog/articles/{article_id}/comments")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        thread = data["comments"][0]
        assert thread["id"] == root["comment_id"]
        assert thread["author_handle"] == "alice"
        assert thread["is_liked"] is False
        assert [r["id"] for r in thread["replies"]] == [reply["comment_id"]]
        assert thread["replies"][0]["reply_to_user_id"] == alice_id

    def test_reply_to_missing_parent(self, client, jwt_service):
        """Replies to unknown comments are 404."""
        login(client, jwt_service, "alice")

        response = client.post(
            "/blog/comments",
            json={
                "article_id": str(uuid4()),
                "content": "Reply",
                "parent_id": str(uuid4()),
            },
        )

        assert response.status_code == 404

    def test_malformed_ids(self, client, jwt_service):
        """Non-UUID identifiers are 400."""
        login(client, jwt_service, "alice")

        assert client.get("/blog/articles/abc/comments").status_code == 400
        response = client.post(
            "/blog/comments", json={"article_id": "abc", "content": "Hi"}
        )
        assert response.status_code == 400

    def test_empty_content_rejected(self, client, jwt_service):
        """Empty comments fail request validation."""
        login(client, jwt_service, "alice")

        response = client.post(
            "/blog/comments", json={"article_id": str(uuid4()), "content": ""}
        )

        assert response.status_code == 422

    def test_pagination_query(self, client, jwt_service):
        """Page and limit select top-level comments only."""
        # Arrange
        article_id = str(uuid4())
        login(client, jwt_service, "alice")
        created = [post_comment(client, article_id, f"Comment {i}") for i in range(3)]
        post_comment(client, article_id, "Reply", parent_id=created[0]["comment_id"])

        # Act
        response = client.get(
            f"/blog/articles/{article_id}/comments", params={"page": 2, "limit": 2}
        )

        # Assert
        data = response.json()
        assert data["total"] == 3
        assert data["limit"] == 2
        assert len(data["comments"]) == 1

    def test_invalid_page_rejected(self, client):
        """Page numbers start at 1."""
        response = client.get(f"/blog/articles/{uuid4()}/comments", params={"page": 0})

        assert response.status_code == 422


class TestLikes:
    """Like and unlike endpoints."""

    def test_like_flow(self, client, jwt_service):
        """Likes update the counter and the viewer's flag."""
        # Arrange
        article_id = str(uuid4())
        login(client, jwt_service, "alice")
        comment = post_comment(client, article_id, "Like me")
        url = f"/blog/comments/{comment['comment_id']}/like"

        # Act
        liked = client.post(url)
        duplicate = client.post(url)
        listing = client.get(f"/blog/articles/{article_id}/comments").json()

        # Assert
        assert liked.status_code == 200
        assert duplicate.status_code == 400
        assert listing["comments"][0]["like_count"] == 1
        assert listing["comments"][0]["is_liked"] is True

        client.cookies.clear()
        anonymous = client.get(f"/blog/articles/{article_id}/comments").json()
        assert anonymous["comments"][0]["is_liked"] is False

    def test_unlike(self, client, jwt_service):
        """Unliking twice only removes one like."""
        login(client, jwt_service, "alice")
        comment = post_comment(client, str(uuid4()), "Like me")
        url = f"/blog/comments/{comment['comment_id']}/like"
        client.post(url)

        first = client.delete(url)
        second = client.delete(url)

        assert first.json() == {"removed": True}
        assert second.json() == {"removed": False}

    def test_like_requires_auth(self, client):
        """Anonymous likes are 401."""
        assert client.post(f"/blog/comments/{uuid4()}/like").status_code == 401
        assert client.delete(f"/blog/comments/{uuid4()}/like").status_code == 401

    def test_like_missing_comment(self, client, jwt_service):
        """Liking an unknown comment is 404."""
        login(client, jwt_service, "alice")

        assert client.post(f"/blog/comments/{uuid4()}/like").status_code == 404


class TestDeleteComment:
    """User deletion endpoint."""

    def test_author_deletes(self, client, jwt_service):
        """Authors remove their comment and its replies."""
        # Arrange
        article_id = str(uuid4())
        login(client, jwt_service, "alice")
        root = post_comment(client, article_id, "Root")
        post_comment(client, article_id, "Reply", parent_id=root["comment_id"])

        # Act
        response = client.delete(f"/blog/comments/{root['comment_id']}")

        # Assert
        assert response.status_code == 204
        listing = client.get(f"/blog/articles/{article_id}/comments").json()
        assert listing["total"] == 0

    def test_stranger_forbidden(self, client, jwt_service):
        """Other users get 403."""
        login(client, jwt_service, "alice")
        comment = post_comment(client, str(uuid4()), "Mine")
        login(client, jwt_service, "mallory")

        response = client.delete(f"/blog/comments/{comment['comment_id']}")

        assert response.status_code == 403

    def test_missing_comment(self, client, jwt_service):
        """Unknown comments are 404."""
        login(client, jwt_service, "alice")

        assert client.delete(f"/blog/comments/{uuid4()}").status_code == 404


class TestModeratedBlog:
    """Comments held for review when auto-approve is off."""

    @pytest.fixture
    def moderated_client(self):
        settings = Settings(comments=CommentSettings(auto_approve=False))
        return TestClient(
            create_app(build_test_container(settings=settings), settings=settings)
        )

    def test_new_comment_is_hidden_until_approved(self, moderated_client, jwt_service):
        """Pending comments stay off the public thread."""
        # Arrange
        article_id = str(uuid4())
        login(moderated_client, jwt_service, "alice")

        # Act
        created = post_comment(moderated_client, article_id, "Awaiting review")
        listing = moderated_client.get(f"/blog/articles/{article_id}/comments")

        # Assert
        assert created["status"] == "pending"
        assert listing.json()["total"] == 0
        assert listing.json()["comments"] == []

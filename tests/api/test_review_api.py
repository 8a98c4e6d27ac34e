import uuid
from http import HTTPStatus

import pytest

from tests.conftest import BaseIntegrationTest, auth_header


class TestReviewAPI(BaseIntegrationTest):
    """Integration tests for the review endpoints and the movie rating they maintain"""

    async def _rating(self, client, movie_id):
        response = await client.get(f"/movies/{movie_id}")
        return response.json()["rating"]

    @pytest.mark.asyncio
    async def test_movie_without_reviews_has_zero_rating(self, client, movie):
        assert await self._rating(client, movie.id) == 0

    @pytest.mark.asyncio
    async def test_create_review(self, client, movie, user, token):
        response = await client.post(
            f"/movies/{movie.id}/reviews", json={"rating": 4, "text": "Slow but deep"}, headers=auth_header(token)
        )

        assert response.status_code == HTTPStatus.CREATED
        data = response.json()
        assert data["user_id"] == str(user.id)
        assert data["rating"] == 4
        assert data["hidden"] is False
        assert data["user"]["full_name"] == "Anna Reviewer"
        assert await self._rating(client, movie.id) == 4.0

    @pytest.mark.asyncio
    async def test_create_review_requires_auth(self, client, movie):
        response = await client.post(f"/movies/{movie.id}/reviews", json={"rating": 4, "text": "Anonymous"})

        assert response.status_code == HTTPStatus.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_second_review_conflicts(self, client, movie, token):
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 5, "text": "Great"}, headers=auth_header(token))

        response = await client.post(
            f"/movies/{movie.id}/reviews", json={"rating": 1, "text": "Terrible"}, headers=auth_header(token)
        )

        assert response.status_code == HTTPStatus.CONFLICT
        reviews = (await client.get(f"/movies/{movie.id}/reviews")).json()
        assert len(reviews) == 1
        assert await self._rating(client, movie.id) == 5.0

    @pytest.mark.asyncio
    async def test_review_for_missing_movie(self, client, token):
        response = await client.post("/movies/999/reviews", json={"rating": 5, "text": "Ghost"}, headers=auth_header(token))

        assert response.status_code == HTTPStatus.NOT_FOUND

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{"rating": 0, "text": "x"}, {"rating": 6, "text": "x"}, {"rating": 3, "text": ""}])
    async def test_invalid_review_payload(self, client, movie, token, payload):
        response = await client.post(f"/movies/{movie.id}/reviews", json=payload, headers=auth_header(token))

        assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_rating_follows_reviews(self, client, movie, user, other_user, admin, token, other_token, admin_token):
        # Arrange: reviews [5, 5, 4]
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 5, "text": "A"}, headers=auth_header(token))
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 5, "text": "B"}, headers=auth_header(admin_token))
        await client.post(
            f"/movies/{movie.id}/reviews", json={"rating": 4, "text": "C"}, headers=auth_header(other_token)
        )
        assert await self._rating(client, movie.id) == 4.7

        # Act: the author of the 4 deletes it
        response = await client.delete(f"/movies/{movie.id}/reviews", headers=auth_header(other_token))

        # Assert
        assert response.status_code == HTTPStatus.OK
        assert response.json()["rating"] == 4
        assert len((await client.get(f"/movies/{movie.id}/reviews")).json()) == 2
        assert await self._rating(client, movie.id) == 5.0

    @pytest.mark.asyncio
    async def test_edit_own_review(self, client, movie, token):
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 2, "text": "Meh"}, headers=auth_header(token))

        response = await client.put(
            f"/movies/{movie.id}/reviews", json={"rating": 5, "text": "Rewatched it"}, headers=auth_header(token)
        )

        assert response.status_code == HTTPStatus.OK
        assert response.json()["text"] == "Rewatched it"
        assert await self._rating(client, movie.id) == 5.0

    @pytest.mark.asyncio
    async def test_edit_without_own_review(self, client, movie, token, other_token):
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 3, "text": "Fine"}, headers=auth_header(token))

        response = await client.put(
            f"/movies/{movie.id}/reviews", json={"rating": 1, "text": "Hijacked"}, headers=auth_header(other_token)
        )

        assert response.status_code == HTTPStatus.NOT_FOUND
        reviews = (await client.get(f"/movies/{movie.id}/reviews")).json()
        assert reviews[0]["text"] == "Fine"

    @pytest.mark.asyncio
    async def test_user_cannot_delete_other_review(self, client, movie, user, token, other_token):
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 3, "text": "Fine"}, headers=auth_header(token))

        response = await client.delete(
            f"/movies/{movie.id}/reviews", params={"user_id": str(user.id)}, headers=auth_header(other_token)
        )

        assert response.status_code == HTTPStatus.FORBIDDEN
        assert len((await client.get(f"/movies/{movie.id}/reviews")).json()) == 1
        assert await self._rating(client, movie.id) == 3.0

    @pytest.mark.asyncio
    async def test_admin_deletes_user_review(self, client, movie, user, token, admin_token):
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 1, "text": "Spam"}, headers=auth_header(token))

        response = await client.delete(
            f"/movies/{movie.id}/reviews", params={"user_id": str(user.id)}, headers=auth_header(admin_token)
        )

        assert response.status_code == HTTPStatus.OK
        assert response.json()["user_id"] == str(user.id)
        assert (await client.get(f"/movies/{movie.id}/reviews")).json() == []
        assert await self._rating(client, movie.id) == 0

    @pytest.mark.asyncio
    async def test_delete_missing_review(self, client, movie, token):
        response = await client.delete(f"/movies/{movie.id}/reviews", headers=auth_header(token))

        assert response.status_code == HTTPStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_hide_and_show_keep_rating(self, client, movie, user, token, admin_token):
        # Arrange
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 2, "text": "Meh"}, headers=auth_header(token))

        # Act
        hidden = await client.patch(f"/movies/{movie.id}/reviews/hide/{user.id}", headers=auth_header(admin_token))
        rating_while_hidden = await self._rating(client, movie.id)
        shown = await client.patch(f"/movies/{movie.id}/reviews/show/{user.id}", headers=auth_header(admin_token))

        # Assert
        assert hidden.status_code == HTTPStatus.OK
        assert hidden.json()["hidden"] is True
        assert rating_while_hidden == 2.0
        assert shown.json()["hidden"] is False
        assert shown.json()["text"] == "Meh"
        assert await self._rating(client, movie.id) == 2.0

    @pytest.mark.asyncio
    async def test_hidden_reviews_are_listed(self, client, movie, user, token, admin_token):
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 2, "text": "Meh"}, headers=auth_header(token))
        await client.patch(f"/movies/{movie.id}/reviews/hide/{user.id}", headers=auth_header(admin_token))

        reviews = (await client.get(f"/movies/{movie.id}/reviews")).json()

        assert [review["hidden"] for review in reviews] == [True]

    @pytest.mark.asyncio
    async def test_hide_requires_admin(self, client, movie, user, token):
        await client.post(f"/movies/{movie.id}/reviews", json={"rating": 2, "text": "Meh"}, headers=auth_header(token))

        response = await client.patch(f"/movies/{movie.id}/reviews/hide/{user.id}", headers=auth_header(token))

        assert response.status_code == HTTPStatus.FORBIDDEN

    @pytest.mark.asyncio
    async def test_hide_missing_review(self, client, movie, admin_token):
        response = await client.patch(
            f"/movies/{movie.id}/reviews/hide/{uuid.uuid4()}", headers=auth_header(admin_token)
        )

        assert response.status_code == HTTPStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_reviews_of_missing_movie(self, client):
        response = await client.get("/movies/999/reviews")

        assert response.status_code == HTTPStatus.NOT_FOUND

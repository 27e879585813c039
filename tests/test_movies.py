"""
Tests for the /api/movies endpoints.
"""

import pytest

from vidly.core.ids import new_object_id
from vidly.models import Movie


class TestMovieEndpoints:
    @pytest.fixture
    def payload(self, genre):
        return {
            "title": "Terminator",
            "genreId": genre.id,
            "numberInStock": 5,
            "dailyRentalRate": 2.5,
        }

    def test_create_movie_embeds_genre(self, client, token, payload, genre):
        response = client.post("/api/movies", json=payload, headers={"x-auth-token": token})

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Terminator"
        assert body["genre"] == {"_id": genre.id, "name": "genre1"}
        assert body["numberInStock"] == 5
        assert body["dailyRentalRate"] == 2.5

    def test_create_movie_with_unknown_genre_returns_400(self, client, token, payload):
        payload["genreId"] = new_object_id()

        response = client.post("/api/movies", json=payload, headers={"x-auth-token": token})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid genre."

    def test_create_movie_rejects_negative_stock(self, client, token, payload):
        payload["numberInStock"] = -1

        response = client.post("/api/movies", json=payload, headers={"x-auth-token": token})

        assert response.status_code == 400

    def test_create_movie_rejects_zero_rate(self, client, token, payload, db):
        payload["dailyRentalRate"] = 0

        response = client.post("/api/movies", json=payload, headers={"x-auth-token": token})

        assert response.status_code == 400
        assert "dailyRentalRate" in response.json()["detail"]
        assert db.query(Movie).count() == 0

    def test_create_movie_rejects_rate_finer_than_cents(self, client, token, payload, db):
        payload["dailyRentalRate"] = 2.555

        response = client.post("/api/movies", json=payload, headers={"x-auth-token": token})

        assert response.status_code == 400
        assert "dailyRentalRate" in response.json()["detail"]
        assert db.query(Movie).count() == 0

    def test_create_movie_requires_login(self, client, payload):
        assert client.post("/api/movies", json=payload).status_code == 401

    def test_list_movies_sorted_by_title(self, client, token, payload):
        for title in ("Zodiac", "Alien"):
            client.post(
                "/api/movies",
                json={**payload, "title": title + " (1979)"},
                headers={"x-auth-token": token},
            )

        response = client.get("/api/movies")

        assert [m["title"] for m in response.json()] == ["Alien (1979)", "Zodiac (1979)"]

    def test_update_movie(self, client, token, payload, movie, db):
        response = client.put(
            f"/api/movies/{movie.id}", json=payload, headers={"x-auth-token": token}
        )

        assert response.status_code == 200
        db.expire_all()
        updated = db.get(Movie, movie.id)
        assert updated.title == "Terminator"
        assert updated.genre.id == payload["genreId"]

    def test_update_unknown_movie_returns_404(self, client, token, payload):
        response = client.put(
            f"/api/movies/{new_object_id()}", json=payload, headers={"x-auth-token": token}
        )

        assert response.status_code == 404

    def test_get_movie_with_malformed_id_returns_404(self, client):
        assert client.get("/api/movies/abc").status_code == 404

    def test_delete_movie_requires_admin(self, client, token, admin_token, movie):
        denied = client.delete(f"/api/movies/{movie.id}", headers={"x-auth-token": token})
        allowed = client.delete(
            f"/api/movies/{movie.id}", headers={"x-auth-token": admin_token}
        )

        assert denied.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["title"] == "12345"

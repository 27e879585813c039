"""
Tests for the /api/genres endpoints.
"""

import pytest

from vidly.core.ids import new_object_id
from vidly.models import Genre


class TestListGenres:
    def test_returns_all_genres_sorted_by_name(self, client, db):
        db.add_all([Genre(name="genre2"), Genre(name="genre1")])
        db.commit()

        response = client.get("/api/genres")

        assert response.status_code == 200
        assert [g["name"] for g in response.json()] == ["genre1", "genre2"]


class TestGetGenre:
    def test_returns_genre_if_id_exists(self, client, genre):
        response = client.get(f"/api/genres/{genre.id}")

        assert response.status_code == 200
        assert response.json() == {"_id": genre.id, "name": "genre1"}

    def test_returns_404_if_id_is_malformed(self, client):
        response = client.get("/api/genres/1")

        assert response.status_code == 404
        assert response.json()["detail"] == "Invalid ID."

    def test_returns_404_if_id_does_not_exist(self, client):
        response = client.get(f"/api/genres/{new_object_id()}")

        assert response.status_code == 404


class TestCreateGenre:
    @pytest.fixture
    def post_genre(self, client, token):
        def _post(name="genre1", headers=None):
            if headers is None:
                headers = {"x-auth-token": token}
            return client.post("/api/genres", json={"name": name}, headers=headers)

        return _post

    def test_returns_401_if_user_is_not_logged_in(self, post_genre):
        assert post_genre(headers={}).status_code == 401

    def test_returns_400_if_name_is_less_than_3_characters(self, post_genre):
        assert post_genre(name="ge").status_code == 400

    def test_returns_400_if_name_is_more_than_50_characters(self, post_genre):
        assert post_genre(name="a" * 51).status_code == 400

    def test_saves_genre_if_valid(self, post_genre, db):
        post_genre()

        assert db.query(Genre).filter(Genre.name == "genre1").first() is not None

    def test_returns_genre(self, post_genre):
        body = post_genre().json()

        assert "_id" in body
        assert body["name"] == "genre1"


class TestUpdateGenre:
    @pytest.fixture
    def put_genre(self, client, token, genre):
        def _put(genre_id=None, name="genre new", headers=None):
            if headers is None:
                headers = {"x-auth-token": token}
            return client.put(
                f"/api/genres/{genre_id or genre.id}",
                json={"name": name},
                headers=headers,
            )

        return _put

    def test_returns_401_if_user_is_not_logged_in(self, put_genre):
        assert put_genre(headers={}).status_code == 401

    def test_returns_400_if_name_is_invalid(self, put_genre):
        assert put_genre(name="ge").status_code == 400

    def test_returns_404_if_id_is_malformed(self, put_genre):
        assert put_genre(genre_id="1").status_code == 404

    def test_returns_404_if_genre_does_not_exist(self, put_genre):
        assert put_genre(genre_id=new_object_id()).status_code == 404

    def test_updates_genre(self, put_genre, db, genre):
        put_genre()

        db.expire_all()
        assert db.get(Genre, genre.id).name == "genre new"

    def test_returns_updated_genre(self, put_genre, genre):
        body = put_genre().json()

        assert body == {"_id": genre.id, "name": "genre new"}


class TestDeleteGenre:
    @pytest.fixture
    def delete_genre(self, client, admin_token, genre):
        def _delete(genre_id=None, headers=None):
            if headers is None:
                headers = {"x-auth-token": admin_token}
            return client.delete(f"/api/genres/{genre_id or genre.id}", headers=headers)

        return _delete

    def test_returns_401_if_user_is_not_logged_in(self, delete_genre):
        assert delete_genre(headers={}).status_code == 401

    def test_returns_403_if_user_is_not_admin(self, delete_genre, token):
        assert delete_genre(headers={"x-auth-token": token}).status_code == 403

    def test_returns_404_if_genre_does_not_exist(self, delete_genre):
        assert delete_genre(genre_id=new_object_id()).status_code == 404

    def test_removes_genre_and_returns_it(self, delete_genre, db, genre):
        genre_id = genre.id

        response = delete_genre()

        assert response.status_code == 200
        assert response.json() == {"_id": genre_id, "name": "genre1"}
        db.expire_all()
        assert db.get(Genre, genre_id) is None

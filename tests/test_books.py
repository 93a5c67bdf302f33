"""
Tests for Books API Endpoints

This module tests all CRUD operations for the /api/v1/books endpoints.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_create_book_success, test_get_book_not_found
"""

from fastapi import status

from app.services.messages import AUTHOR_NOT_FOUND, NOT_FOUND


class TestListBooks:
    """Tests for GET /api/v1/books/ endpoint."""

    def test_list_books_empty(self, client):
        response = client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] == []

    def test_list_books_with_data(self, client, sample_book):
        response = client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert len(data) == 1
        assert data[0]["title"] == "Dom Casmurro"
        assert data[0]["author"]["first_name"] == "Machado"


class TestGetBook:
    """Tests for GET /api/v1/books/{book_id} endpoint."""

    def test_get_book_success(self, client, sample_book, sample_author):
        response = client.get(f"/api/v1/books/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["id"] == sample_book.id
        assert data["author_id"] == sample_author.id

    def test_get_book_not_found(self, client):
        response = client.get("/api/v1/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "status": False,
            "message": NOT_FOUND,
            "data": None,
        }

    def test_get_book_invalid_id(self, client):
        response = client.get("/api/v1/books/not-a-number")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestGetBooksByAuthor:
    """Tests for GET /api/v1/books/by-author/{author_id} endpoint."""

    def test_get_books_by_author(self, client, multiple_books, second_author):
        response = client.get(f"/api/v1/books/by-author/{second_author.id}")

        assert response.status_code == status.HTTP_200_OK
        titles = [b["title"] for b in response.json()["data"]]
        assert titles == ["A Hora da Estrela", "Perto do Coração Selvagem"]

    def test_get_books_by_author_without_books(self, client, sample_author):
        response = client.get(f"/api/v1/books/by-author/{sample_author.id}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["status"] is True
        assert body["data"] == []

    def test_get_books_by_unknown_author(self, client):
        response = client.get("/api/v1/books/by-author/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == NOT_FOUND


class TestCreateBook:
    """Tests for POST /api/v1/books/ endpoint."""

    def test_create_book_success(self, client, sample_author):
        response = client.post(
            "/api/v1/books/",
            json={"title": "Quincas Borba", "author_id": sample_author.id},
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["status"] is True
        assert [b["title"] for b in body["data"]] == ["Quincas Borba"]

    def test_create_book_unknown_author(self, client):
        response = client.post(
            "/api/v1/books/",
            json={"title": "Orphan", "author_id": 99999},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == AUTHOR_NOT_FOUND

        listed = client.get("/api/v1/books/").json()["data"]
        assert listed == []

    def test_create_book_blank_title_rejected(self, client, sample_author):
        response = client.post(
            "/api/v1/books/",
            json={"title": "  ", "author_id": sample_author.id},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestEditBook:
    """Tests for PUT /api/v1/books/{book_id} endpoint."""

    def test_edit_book(self, client, sample_book, sample_author):
        response = client.put(
            f"/api/v1/books/{sample_book.id}",
            json={"title": "Dom Casmurro (2a ed.)", "author_id": sample_author.id},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"][0]["title"] == "Dom Casmurro (2a ed.)"

    def test_edit_book_not_found(self, client, sample_author):
        response = client.put(
            "/api/v1/books/99999",
            json={"title": "Nothing", "author_id": sample_author.id},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == NOT_FOUND

    def test_edit_book_unknown_author(self, client, sample_book):
        response = client.put(
            f"/api/v1/books/{sample_book.id}",
            json={"title": "Dom Casmurro", "author_id": 99999},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == AUTHOR_NOT_FOUND


class TestDeleteBook:
    """Tests for DELETE /api/v1/books/{book_id} endpoint."""

    def test_delete_book(self, client, sample_book):
        response = client.delete(f"/api/v1/books/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] == []

        response = client.get(f"/api/v1/books/{sample_book.id}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_not_found(self, client):
        response = client.delete("/api/v1/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

# tests/test_api/test_books.py

import pytest
from core.sa.models import Book, Library

@pytest.fixture
def other_library(db_session):
    library = Library(name="Branch")
    db_session.add(library)
    db_session.commit()
    return library

def test_create_book(client, sample_library):
    response = client.post("/books", json={"name": "Dune", "library_id": sample_library.id})
    assert response.status_code == 201
    assert response.json() == {
        "id": 1,
        "name": "Dune",
        "library_id": sample_library.id,
        "library": {"id": sample_library.id, "name": "Central"},
    }
    assert response.headers["location"] == "http://testserver/books/1"

@pytest.mark.parametrize("payload", [
    {"name": "Dune", "libraryId": 1},
    {"name": "Dune", "library": {"id": 1}},
])
def test_create_book_accepts_library_reference_forms(client, sample_library, payload):
    response = client.post("/books", json=payload)
    assert response.status_code == 201
    assert response.json()["library_id"] == sample_library.id

def test_create_book_in_missing_library_is_unprocessable(client, db_session):
    response = client.post("/books", json={"name": "Dune", "library_id": 999})
    assert response.status_code == 422
    assert response.json() == {"detail": "Library 999 does not exist"}
    assert db_session.query(Book).count() == 0

def test_create_book_validates_body(client, sample_library):
    assert client.post("/books", json={"name": "Dune"}).status_code == 400
    assert client.post("/books", json={"library_id": sample_library.id}).status_code == 400
    assert client.post("/books", json={"name": "", "library_id": sample_library.id}).status_code == 400
    assert client.post("/books", json={"name": "Dune", "library_id": "one"}).status_code == 400

def test_get_book(client, sample_book):
    response = client.get(f"/books/{sample_book.id}")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Dune"
    assert body["library"] == {"id": sample_book.library_id, "name": "Central"}

def test_get_missing_book_is_unprocessable(client):
    response = client.get("/books/999")
    assert response.status_code == 422
    assert response.json() == {"detail": "Book 999 does not exist"}

def test_update_book_moves_library(client, sample_book, other_library):
    response = client.put(
        f"/books/{sample_book.id}",
        json={"id": 77, "name": "Dune Messiah", "library_id": other_library.id}
    )
    assert response.status_code == 204
    assert response.content == b""

    fetched = client.get(f"/books/{sample_book.id}").json()
    assert fetched["id"] == sample_book.id
    assert fetched["name"] == "Dune Messiah"
    assert fetched["library"] == {"id": other_library.id, "name": "Branch"}
    assert client.get("/books/77").status_code == 422

def test_update_book_resolves_library_from_body(client, sample_library):
    """The owning library comes from the body, not from the book's own ID."""
    client.post("/books", json={"name": "Dune", "library_id": sample_library.id})
    second = client.post("/books", json={"name": "Emma", "library_id": sample_library.id}).json()
    assert second["id"] == 2

    response = client.put("/books/2", json={"name": "Emma (annotated)", "library_id": sample_library.id})
    assert response.status_code == 204
    assert client.get("/books/2").json()["name"] == "Emma (annotated)"

def test_update_missing_book_is_unprocessable(client, sample_library):
    response = client.put("/books/999", json={"name": "Dune", "library_id": sample_library.id})
    assert response.status_code == 422

def test_update_book_into_missing_library_is_unprocessable(client, sample_book):
    response = client.put(f"/books/{sample_book.id}", json={"name": "Dune", "library_id": 999})
    assert response.status_code == 422
    assert client.get(f"/books/{sample_book.id}").json()["library_id"] == sample_book.library_id

def test_delete_book(client, sample_book):
    assert client.delete(f"/books/{sample_book.id}").status_code == 204
    assert client.get(f"/books/{sample_book.id}").status_code == 422

def test_delete_missing_book_is_unprocessable(client):
    assert client.delete("/books/999").status_code == 422

def test_list_books(client, sample_library, other_library):
    for name in ["Dune", "Emma", "Ulysses"]:
        client.post("/books", json={"name": name, "library_id": sample_library.id})
    client.post("/books", json={"name": "Beloved", "library_id": other_library.id})

    body = client.get("/books", params={"size": 3, "sort": "name"}).json()
    assert body["total"] == 4
    assert body["total_pages"] == 2
    assert [item["name"] for item in body["items"]] == ["Beloved", "Dune", "Emma"]
    assert body["items"][0]["library"]["name"] == "Branch"

    last = client.get("/books", params={"size": 3, "sort": "name", "page": 2}).json()
    assert [item["name"] for item in last["items"]] == ["Ulysses"]

    assert client.get("/books", params={"page": 3, "size": 3}).json()["items"] == []

def test_list_books_rejects_bad_sort(client):
    response = client.get("/books", params={"sort": "title"})
    assert response.status_code == 400
    assert "title" in response.json()["detail"]

def test_catalog_scenario(client):
    """Library and book lifecycle, including cascade on library delete."""
    library = client.post("/libraries", json={"name": "Central"})
    assert library.status_code == 201
    assert library.json()["id"] == 1

    book = client.post("/books", json={"name": "Dune", "libraryId": 1})
    assert book.status_code == 201
    assert book.json()["id"] == 1
    assert book.json()["library"]["id"] == 1

    assert client.delete("/libraries/1").status_code == 204
    assert client.get("/books/1").status_code == 422
    assert client.get("/books/999").status_code == 422

def test_out_of_range_ids_are_unprocessable(client, sample_library, db_session):
    huge = 2**64
    response = client.post("/books", json={"name": "Dune", "library_id": huge})
    assert response.status_code == 422
    assert db_session.query(Book).count() == 0

    payload = {"name": "Dune", "library_id": sample_library.id}
    assert client.get(f"/books/{huge}").status_code == 422
    assert client.put(f"/books/{huge}", json=payload).status_code == 422
    assert client.delete(f"/books/{huge}").status_code == 422

def test_list_books_huge_page_is_empty(client, sample_book):
    response = client.get("/books", params={"page": 10**17, "size": 100})
    assert response.status_code == 200
    assert response.json()["items"] == []
    assert response.json()["total"] == 1

def test_book_name_length_limit(client, sample_library):
    response = client.post("/books", json={"name": "x" * 256, "library_id": sample_library.id})
    assert response.status_code == 400

# api/routes/books.py

import logging
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from core.config import settings
from core.exceptions import ReferenceNotFoundError
from core.sa.database import get_db
from core.sa.models import Book, Library
from core.sa.repositories.book import BookRepository
from core.sa.repositories.library import LibraryRepository
from api.schemas import Page, BookCreate, BookSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])

def _get_book_or_422(repo: BookRepository, book_id: int) -> Book:
    book = repo.get_by_id(book_id)
    if book is None:
        logger.warning(f"Book {book_id} not found")
        raise ReferenceNotFoundError("Book", book_id)
    return book

def _resolve_library_or_422(db: Session, library_id: int) -> Library:
    library = LibraryRepository(db).get_by_id(library_id)
    if library is None:
        logger.warning(f"Library {library_id} referenced by a book not found")
        raise ReferenceNotFoundError("Library", library_id)
    return library

@router.post("", response_model=BookSchema, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Create a book in an existing library.

    Returns 422 without persisting anything when the library does not exist.
    """
    library = _resolve_library_or_422(db, payload.library_id)
    repo = BookRepository(db)
    book = repo.create(payload.name, library=library)
    logger.info(f"Created book {book.id} in library {library.id}")
    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    return book

@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_book(book_id: int, payload: BookCreate, db: Session = Depends(get_db)):
    """
    Replace a book's fields and owning library. The book keeps its ID.

    Both the book and the library named by ``library_id`` in the body must
    exist, otherwise 422.
    """
    repo = BookRepository(db)
    library = _resolve_library_or_422(db, payload.library_id)
    book = _get_book_or_422(repo, book_id)
    repo.update(book, name=payload.name, library=library)
    logger.info(f"Updated book {book_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, db: Session = Depends(get_db)):
    repo = BookRepository(db)
    book = _get_book_or_422(repo, book_id)
    repo.delete(book)
    logger.info(f"Deleted book {book_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("", response_model=Page[BookSchema])
def list_books(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, description="Items per page"),
    sort: str = Query("id", description="Sort field (id, name, library_id, created_at)"),
    order: str = Query("asc", description="Sort order (asc or desc)"),
    db: Session = Depends(get_db)
):
    """
    Get a paginated list of books, each with its owning library.
    """
    repo = BookRepository(db)
    books, total = repo.find_page(page=page, size=size, sort_field=sort, sort_order=order)
    return Page[BookSchema].build(
        items=[BookSchema.model_validate(book) for book in books],
        total=total,
        page=page,
        size=size
    )

@router.get("/{book_id}", response_model=BookSchema)
def get_book(book_id: int, db: Session = Depends(get_db)):
    repo = BookRepository(db)
    return _get_book_or_422(repo, book_id)

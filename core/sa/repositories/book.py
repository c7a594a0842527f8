# core/sa/repositories/book.py
from sqlalchemy.orm import Query, joinedload
from core.sa.models import Book, Library
from .base import BaseRepository

class BookRepository(BaseRepository[Book]):
    model = Book
    sort_fields = ('id', 'name', 'library_id', 'created_at')

    def _base_query(self) -> Query:
        # Pages always render the owning library
        return self.session.query(Book).options(joinedload(Book.library))

    def create(self, name: str, library: Library) -> Book:
        """Create a book owned by an already resolved library.

        Args:
            name: The name of the book
            library: The owning Library, which must exist

        Returns:
            The created Book object with its generated ID
        """
        return self.save(Book(name=name, library=library))

    def update(self, book: Book, name: str, library: Library) -> Book:
        """Replace the mutable fields of an existing book, keeping its ID."""
        book.name = name
        book.library = library
        return self.save(book)

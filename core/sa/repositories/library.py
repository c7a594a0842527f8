# core/sa/repositories/library.py
from core.sa.models import Library
from .base import BaseRepository

class LibraryRepository(BaseRepository[Library]):
    """Repository for managing Library entities."""

    model = Library

    def create(self, name: str) -> Library:
        """Create a new library.

        Args:
            name: The name of the library

        Returns:
            The created Library object with its generated ID
        """
        return self.save(Library(name=name))

    def update(self, library: Library, name: str) -> Library:
        """Replace the mutable fields of an existing library, keeping its ID."""
        library.name = name
        return self.save(library)

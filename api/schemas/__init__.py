# api/schemas/__init__.py
from .common import Page
from .library import LibraryCreate, LibrarySchema
from .book import BookCreate, BookSchema

__all__ = ['Page', 'LibraryCreate', 'LibrarySchema', 'BookCreate', 'BookSchema']

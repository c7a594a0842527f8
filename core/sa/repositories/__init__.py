# core/sa/repositories/__init__.py
from .base import BaseRepository
from .library import LibraryRepository
from .book import BookRepository

__all__ = ['BaseRepository', 'LibraryRepository', 'BookRepository']

# core/sa/__init__.py
from .database import Database
from .models import Base, Library, Book

__all__ = [
    'Database',
    'Base',
    'Library',
    'Book'
]

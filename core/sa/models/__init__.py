# core/sa/models/__init__.py
from .base import Base, TimestampMixin
from .library import Library
from .book import Book

__all__ = [
    'Base',
    'TimestampMixin',
    'Library',
    'Book'
]

# cli/commands/__init__.py
from .db import db
from .library import library
from .book import book
from .serve import serve

__all__ = ['db', 'library', 'book', 'serve']

# core/exceptions.py
from typing import Any, Iterable


class CatalogError(Exception):
    """Base class for catalog errors"""
    pass


class ReferenceNotFoundError(CatalogError):
    """Raised when a target or referenced entity does not exist.

    The API reports this as 422 Unprocessable Entity for both the resource
    being addressed and a parent it refers to.
    """

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} does not exist")


class InvalidPageRequestError(CatalogError):
    """Raised for an unknown sort field or sort order"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @classmethod
    def bad_sort_field(cls, field: str, allowed: Iterable[str]) -> "InvalidPageRequestError":
        return cls(f"Invalid sort field '{field}'. Must be one of: {', '.join(allowed)}")

    @classmethod
    def bad_sort_order(cls, order: str) -> "InvalidPageRequestError":
        return cls(f"Invalid sort order '{order}'. Must be 'asc' or 'desc'")

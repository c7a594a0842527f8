# api/schemas/common.py
from typing import List, TypeVar, Generic
from pydantic import BaseModel

DataT = TypeVar('DataT')

class Page(BaseModel, Generic[DataT]):
    """
    Generic schema for paginated API responses.
    """
    items: List[DataT]
    total: int
    page: int
    size: int
    total_pages: int

    @classmethod
    def build(cls, items: List[DataT], total: int, page: int, size: int) -> "Page[DataT]":
        total_pages = (total + size - 1) // size
        return cls(items=items, total=total, page=page, size=size, total_pages=total_pages)

# core/sa/repositories/base.py
import logging
from typing import TypeVar, Generic, Optional, List, Type, Dict, Tuple
from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, Query

from core.exceptions import InvalidPageRequestError
from core.sa.models import Base

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Base)

# Range of a 64-bit signed integer column
MIN_INTEGER = -2**63
MAX_INTEGER = 2**63 - 1

class BaseRepository(Generic[T]):
    """Hand-written CRUD and paging on top of a SQLAlchemy session.

    Subclasses set ``model`` and ``sort_fields`` (the columns a page may be
    ordered by).
    """

    model: Type[T]
    sort_fields: Tuple[str, ...] = ('id', 'name', 'created_at')

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get an entity by its ID.

        Args:
            entity_id: The ID of the entity to retrieve

        Returns:
            The entity if found, None otherwise. An ID outside the range
            the column can hold is never found.
        """
        if not MIN_INTEGER <= entity_id <= MAX_INTEGER:
            return None
        return self.session.get(self.model, entity_id)

    def count(self) -> int:
        return self.session.query(self.model).count()

    def find_page(
        self,
        page: int = 1,
        size: int = 20,
        sort_field: str = 'id',
        sort_order: str = 'asc'
    ) -> Tuple[List[T], int]:
        """Get one page of entities and the total number of entities.

        Args:
            page: Page number (1-based)
            size: Number of items per page
            sort_field: Column to sort by, one of ``sort_fields``
            sort_order: Sort order (asc or desc)

        Returns:
            Tuple of (entities on the page, total count). A page past the end
            yields an empty list.

        Raises:
            InvalidPageRequestError: unknown sort field or sort order
        """
        columns: Dict[str, object] = {name: getattr(self.model, name) for name in self.sort_fields}
        if sort_field not in columns:
            raise InvalidPageRequestError.bad_sort_field(sort_field, self.sort_fields)
        if sort_order not in ('asc', 'desc'):
            raise InvalidPageRequestError.bad_sort_order(sort_order)

        sort_column = columns[sort_field]
        query = self._base_query()
        if sort_order == 'desc':
            query = query.order_by(desc(sort_column), desc(self.model.id))
        else:
            query = query.order_by(sort_column, self.model.id)

        offset = (page - 1) * size
        if offset > MAX_INTEGER:
            return [], self.count()
        items = query.offset(offset).limit(size).all()
        return items, self.count()

    def _base_query(self) -> Query:
        return self.session.query(self.model)

    def save(self, entity: T) -> T:
        """Insert or update an entity and commit.

        Args:
            entity: The entity to persist

        Returns:
            The persisted entity with its generated ID populated
        """
        self.session.add(entity)
        self._commit()
        return entity

    def delete(self, entity: T) -> None:
        """Delete an entity and commit."""
        self.session.delete(entity)
        self._commit()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error committing {self.model.__name__}: {str(e)}")
            raise

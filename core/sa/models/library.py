# core/sa/models/library.py
from typing import List
from sqlalchemy import Integer, String, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, NAME_MAX_LENGTH

class Library(Base, TimestampMixin):
    __tablename__ = 'libraries'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    # Relationships
    # Deleting a library removes the books it owns
    books: Mapped[List['Book']] = relationship(
        'Book',
        back_populates='library',
        cascade='all, delete-orphan',
        passive_deletes=True
    )

    __table_args__ = (
        Index('idx_libraries_name', 'name'),

        # Never reuse the ID of a deleted library
        {'sqlite_autoincrement': True}
    )

    def __repr__(self) -> str:
        return f"<Library(id={self.id}, name='{self.name}')>"

# core/sa/models/book.py
from sqlalchemy import Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, NAME_MAX_LENGTH

class Book(Base, TimestampMixin):
    __tablename__ = 'books'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    library_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('libraries.id', ondelete='CASCADE'),
        nullable=False
    )

    # Relationships
    library = relationship('Library', back_populates='books')

    __table_args__ = (
        Index('idx_books_name', 'name'),
        Index('idx_books_library_id', 'library_id'),
        {'sqlite_autoincrement': True}
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, name='{self.name}', library_id={self.library_id})>"

"""Create libraries and books tables

Revision ID: 1f3c2a9d7b10
Revises: 
Create Date: 2026-10-19 09:12:44.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '1f3c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('libraries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True
    )
    op.create_index('idx_libraries_name', 'libraries', ['name'])

    # Books go away with their library
    op.create_table('books',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('library_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['library_id'], ['libraries.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True
    )
    op.create_index('idx_books_name', 'books', ['name'])
    op.create_index('idx_books_library_id', 'books', ['library_id'])


def downgrade() -> None:
    op.drop_index('idx_books_library_id', table_name='books')
    op.drop_index('idx_books_name', table_name='books')
    op.drop_table('books')
    op.drop_index('idx_libraries_name', table_name='libraries')
    op.drop_table('libraries')

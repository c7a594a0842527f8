# tests/test_schema.py
from sqlalchemy import inspect


def test_tables_exist(database):
    """Both catalog tables are created from the models"""
    tables = inspect(database.engine).get_table_names()
    assert "libraries" in tables
    assert "books" in tables

def test_books_reference_libraries(database):
    """books.library_id is a cascading foreign key to libraries.id"""
    fks = inspect(database.engine).get_foreign_keys("books")
    assert len(fks) == 1
    fk = fks[0]
    assert fk["constrained_columns"] == ["library_id"]
    assert fk["referred_table"] == "libraries"
    assert fk["referred_columns"] == ["id"]
    assert fk["options"].get("ondelete") == "CASCADE"

def test_required_columns_not_nullable(database):
    inspector = inspect(database.engine)
    library_columns = {c["name"]: c for c in inspector.get_columns("libraries")}
    book_columns = {c["name"]: c for c in inspector.get_columns("books")}

    assert library_columns["name"]["nullable"] is False
    assert book_columns["name"]["nullable"] is False
    assert book_columns["library_id"]["nullable"] is False

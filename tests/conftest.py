# tests/conftest.py
import sys
import pytest
from pathlib import Path
from sqlalchemy.sql import text
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from core.sa.models import Base, Library, Book
from core.sa.database import Database, get_db
from api.main import app

@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return f"sqlite:///{test_dir / 'test_catalog.db'}"

@pytest.fixture(scope="session")
def database(test_db_url):
    """Create a test database instance"""
    db = Database(test_db_url)

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.dispose()

@pytest.fixture(autouse=True)
def cleanup_db(database):
    """Empty the tables and restart ID sequences before each test"""
    with database.engine.begin() as conn:
        conn.execute(text("DELETE FROM books"))
        conn.execute(text("DELETE FROM libraries"))
        conn.execute(text("DELETE FROM sqlite_sequence"))
    yield

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client(database):
    """TestClient whose requests each get a session on the test database"""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def sample_library(db_session):
    """Create a sample library for testing."""
    library = Library(name="Central")
    db_session.add(library)
    db_session.commit()
    return library

@pytest.fixture
def sample_book(db_session, sample_library):
    """Create a sample book in the sample library."""
    book = Book(name="Dune", library=sample_library)
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def multiple_libraries(db_session):
    """Create five libraries named Library 0 .. Library 4."""
    libraries = [Library(name=f"Library {i}") for i in range(5)]
    db_session.add_all(libraries)
    db_session.commit()
    return libraries

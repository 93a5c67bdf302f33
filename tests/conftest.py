"""
pytest Fixtures for Library API Tests

This file contains shared fixtures used across all test files.

For database tests, we use:
- session scope for engine (expensive to create)
- function scope for sessions (isolation between tests)

Each test runs inside a transaction that is rolled back afterwards, so
every test starts from an empty database even though the services commit.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Author, Book
from app.services import AuthorService, BookService

# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is joined to an outer transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session; the
    services built for each request pick it up from there.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def author_service(db_session: Session) -> AuthorService:
    return AuthorService(db_session)


@pytest.fixture
def book_service(db_session: Session) -> BookService:
    return BookService(db_session)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(first_name="Machado", last_name="de Assis")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    author = Author(first_name="Clarice", last_name="Lispector")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(db_session: Session, sample_author: Author) -> Book:
    """Create a sample book written by sample_author."""
    book = Book(title="Dom Casmurro", author=sample_author)
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(
    db_session: Session,
    sample_author: Author,
    second_author: Author,
) -> list[Book]:
    """
    Create books for two authors, interleaved.

    sample_author gets 3 books, second_author gets 2.
    """
    titles = [
        ("Dom Casmurro", sample_author),
        ("A Hora da Estrela", second_author),
        ("Memórias Póstumas de Brás Cubas", sample_author),
        ("Perto do Coração Selvagem", second_author),
        ("Quincas Borba", sample_author),
    ]
    books = []
    for title, author in titles:
        book = Book(title=title, author=author)
        db_session.add(book)
        books.append(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books

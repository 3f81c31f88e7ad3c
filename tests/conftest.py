# tests/conftest.py
import os

# Minimum bcrypt cost, must be set before libroresenas reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from libroresenas.api.main import create_app
from libroresenas.crud.crud_user import create_user
from libroresenas.db.session import get_db, init_db
from libroresenas.models.book import Book
from libroresenas.schemas.user import UserCreate

# --- Test Database Setup ---
# A fresh in-memory SQLite database per test; StaticPool keeps a single
# connection so every session sees the same database.
TEST_DATABASE_URL = "sqlite:///:memory:"
TEST_PASSWORD = "password123"

@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()

@pytest.fixture(scope="function")
def db_session_factory(db_engine):
    """Returns a SQLAlchemy session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

@pytest.fixture(scope="function")
def db_session(db_session_factory):
    session = db_session_factory()
    try:
        yield session # Test function runs here
    finally:
        session.close()

# --- Shared data fixtures ---
@pytest.fixture
def test_user(db_session):
    return create_user(db_session, UserCreate(email="reader@example.com", username="reader", password=TEST_PASSWORD))

@pytest.fixture
def test_user_2(db_session):
    return create_user(db_session, UserCreate(email="critic@example.com", username="critic", password=TEST_PASSWORD))

@pytest.fixture
def test_book(db_session):
    book = Book(title="The Hobbit", author="J.R.R. Tolkien", genre="Fantasy")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book

# --- API client ---
@pytest.fixture
def app(db_session_factory):
    application = create_app()

    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = override_get_db
    return application

@pytest.fixture
def client(app):
    return TestClient(app)

@pytest.fixture
def auth():
    """HTTP Basic credentials for a user created with TEST_PASSWORD."""
    def credentials(user):
        return (user.email, TEST_PASSWORD)
    return credentials

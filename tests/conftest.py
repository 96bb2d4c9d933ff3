"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/accounts", "/accounts_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
    os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

# Minimum bcrypt cost keeps the suite fast
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from accounts import models  # noqa: E402, F401
from accounts.database import Base, get_db  # noqa: E402
from accounts.main import app  # noqa: E402

DEFAULT_PASSWORD = "testpass123"  # noqa: S105

IS_SQLITE = "sqlite" in SQLALCHEMY_DATABASE_URL


class AuthHeaders(dict):
    """Dict subclass that also stores the logged-in user's id, email and refresh token."""

    def __init__(
        self,
        *args,
        user_id: int | None = None,
        email: str | None = None,
        refresh_token: str | None = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email
        self.refresh_token = refresh_token


connect_args = {"check_same_thread": False} if IS_SQLITE else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup(client, email, name="Test User", password=DEFAULT_PASSWORD, is_superuser=False):
    """Create a user through the API and return the response body."""
    response = client.post(
        "/users",
        json={"name": name, "email": email, "password": password, "is_superuser": is_superuser},
    )
    assert response.status_code == 201, response.text
    return response.json()


def login(client, email, password=DEFAULT_PASSWORD):
    """Log in through the API and return the token pair."""
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


def make_auth_headers(client, email, is_superuser=False):
    user = signup(client, email, is_superuser=is_superuser)
    tokens = login(client, email)
    return AuthHeaders(
        {"Authorization": f"Bearer {tokens['accessToken']}"},
        user_id=user["id"],
        email=email,
        refresh_token=tokens["refreshToken"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a regular user and return auth headers with user info."""
    return make_auth_headers(client, "test@example.com")


@pytest.fixture
def superuser_headers(client):
    """Create a superuser and return auth headers with user info."""
    return make_auth_headers(client, "admin@example.com", is_superuser=True)

"""Shared test fixtures for notekeeper."""

import os
import sqlite3
import tempfile

import pytest

# Point the app at a throwaway database before notekeeper.main initializes it
_fd, _import_db_path = tempfile.mkstemp(suffix=".db")
os.close(_fd)
os.environ.setdefault("DATABASE_PATH", _import_db_path)

from notekeeper.main import app
from notekeeper.config import settings
from notekeeper.db import Core, apply_schema, init_db
from notekeeper.auth import schemas, service, token as auth_token


@pytest.fixture(autouse=True)
def fast_bcrypt():
    """Use the minimum bcrypt work factor so tests run quickly."""
    original = settings.bcrypt_work_factor
    settings.bcrypt_work_factor = 4
    yield
    settings.bcrypt_work_factor = original


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    db.execute("PRAGMA foreign_keys = ON")
    apply_schema(db)

    yield db

    db.close()


@pytest.fixture
def core(test_db):
    """Core storage handle over the in-memory test database."""
    return Core(test_db)


@pytest.fixture
def client():
    """Create test client backed by a fresh temp file database."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    os.unlink(db_path)

    original_db_path = settings.database_path
    settings.database_path = db_path
    try:
        init_db()

        app.config['TESTING'] = True
        with app.test_client() as client:
            yield client
    finally:
        settings.database_path = original_db_path
        if os.path.exists(db_path):
            os.unlink(db_path)


@pytest.fixture
def test_user(core):
    """Register a user in the in-memory database.

    Returns a tuple of (user, password).
    """
    password = "TestPass123"
    user = service.register(
        core,
        schemas.UserCreate(username="testuser", password=password, fullname="Test User")
    )
    core.commit()
    return user, password


@pytest.fixture
def jwt_token(test_user):
    """JWT token for the test user."""
    user, _password = test_user
    return auth_token.generate_access_token(user)


@pytest.fixture
def auth_headers(jwt_token):
    """Authorization header carrying the test user's token."""
    return {"Authorization": f"Bearer {jwt_token}"}


def _register_and_login(client, username="alice", password="pw1", fullname="Alice A"):
    """Register through the API, log in, and return auth headers."""
    response = client.post(
        "/register",
        json={"username": username, "password": password, "fullname": fullname}
    )
    assert response.status_code == 200

    response = client.post("/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


@pytest.fixture
def authenticated_client(client):
    """Test client plus auth headers for a user registered through the API.

    Returns a tuple of (client, auth_headers).
    """
    return client, _register_and_login(client)


@pytest.fixture
def login_as(client):
    """Factory that registers and logs in a user, returning auth headers."""
    def _login_as(username, password="pw1", fullname=""):
        return _register_and_login(client, username, password, fullname)
    return _login_as

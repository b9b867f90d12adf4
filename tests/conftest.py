"""
Shared fixtures: in-memory database, HTTP client, signed-in operator.
"""

import asyncio
import os

import pytest
from passlib.context import CryptContext

OPERATOR_EMAIL = "founder@gloverse.test"
OPERATOR_PASSWORD = "Jagpar"

# Settings are read at import time, so the environment has to be ready first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("DATABASE_NAME", "gloverse-d94dc")
os.environ["OPERATOR_EMAIL"] = OPERATOR_EMAIL
os.environ["OPERATOR_PASSWORD_HASH"] = CryptContext(
    schemes=["bcrypt"], bcrypt__rounds=4
).hash(OPERATOR_PASSWORD)

from fastapi.testclient import TestClient  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

from gloverse_hq.core import database  # noqa: E402
from gloverse_hq.main import app  # noqa: E402


@pytest.fixture
def mock_db():
    db = AsyncMongoMockClient()["gloverse-d94dc"]
    previous = database.db.db
    database.db.db = db
    yield db
    database.db.db = previous


@pytest.fixture
def client(mock_db):
    return TestClient(app)


@pytest.fixture
def operator(client):
    """Client holding a valid session cookie"""
    response = client.post(
        "/api/v1/auth/login",
        data={"email": OPERATOR_EMAIL, "password": OPERATOR_PASSWORD},
    )
    assert response.status_code == 200
    return client


def seed(db, collection, *docs):
    asyncio.run(db[collection].insert_many(list(docs)))


def fetch(db, collection, doc_id):
    return asyncio.run(db[collection].find_one({"_id": doc_id}))

# Test configuration
import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument

# Add parent directory (customer-service) to sys.path so 'app' can be imported
service_dir = Path(__file__).parent.parent
sys.path.insert(0, str(service_dir))

# Set test environment variables BEFORE importing app modules
os.environ["MONGO_URI"] = "mongodb://localhost:27017"
os.environ["MONGO_DB_NAME"] = "customer_test_db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["JSON_LOGS"] = "false"

from app.database import MongoManager  # noqa: E402
from app.repositories.mongo_repository import MongoCustomerRepository  # noqa: E402


class CursorStub:
    """
    Async cursor over a fixed list of documents.

    ``error`` is raised after the documents are exhausted.
    """

    def __init__(self, documents, error: Exception | None = None):
        self._documents = list(documents)
        self._error = error
        self.closed = False

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._documents:
            return self._documents.pop(0)
        if self._error is not None:
            raise self._error
        raise StopAsyncIteration

    async def close(self):
        self.closed = True


class InMemoryCollection:
    """
    Minimal stand-in for an async pymongo collection.

    Supports the equality and ``$exists`` filters and the five methods the
    customer repository calls. Documents are kept in insertion order.
    """

    def __init__(self):
        self.documents: list[dict] = []

    @staticmethod
    def _matches(document: dict, query: dict) -> bool:
        for key, condition in query.items():
            if isinstance(condition, dict) and "$exists" in condition:
                if (key in document) != condition["$exists"]:
                    return False
            elif document.get(key) != condition:
                return False
        return True

    def _first_match(self, query: dict):
        for index, document in enumerate(self.documents):
            if self._matches(document, query):
                return index, document
        return None, None

    def find(self, filter=None, skip=0, limit=0):
        matched = [dict(d) for d in self.documents if self._matches(d, filter or {})]
        matched = matched[skip:]
        if limit:
            matched = matched[:limit]
        return CursorStub(matched)

    async def find_one(self, filter):
        _, document = self._first_match(filter)
        return dict(document) if document is not None else None

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one_and_update(
        self, filter, update, return_document=ReturnDocument.BEFORE
    ):
        _, document = self._first_match(filter)
        if document is None:
            return None
        before = dict(document)
        document.update(update["$set"])
        return dict(document) if return_document == ReturnDocument.AFTER else before

    async def find_one_and_delete(self, filter):
        index, document = self._first_match(filter)
        if document is None:
            return None
        del self.documents[index]
        return document


class StepClock:
    """Clock returning strictly increasing UTC timestamps."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current = self.current + timedelta(seconds=1)
        return self.current


@pytest.fixture
def collection():
    """Empty in-memory customer collection."""
    return InMemoryCollection()


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def repo(collection, clock):
    """Repository backed by the in-memory collection."""
    return MongoCustomerRepository({"customer": collection}, clock=clock)


@pytest.fixture
def cursor_factory():
    """Build cursor stubs for mocked ``find`` calls."""
    return CursorStub


@pytest.fixture
def mock_collection():
    """Mock collection for error handling and call assertions."""
    mock = MagicMock()
    mock.find_one = AsyncMock()
    mock.insert_one = AsyncMock()
    mock.find_one_and_update = AsyncMock()
    mock.find_one_and_delete = AsyncMock()
    return mock


@pytest.fixture
def mock_repo(mock_collection):
    return MongoCustomerRepository({"customer": mock_collection})


@pytest.fixture
def mock_manager():
    """MongoDB manager that never opens a connection."""
    manager = MagicMock(spec=MongoManager)
    manager.connect = AsyncMock()
    manager.disconnect = AsyncMock()
    manager.ping = AsyncMock(return_value=True)
    return manager

"""Pytest configuration and fixtures for DocVault tests."""

import os
import sys

# Set required env vars BEFORE any imports that might trigger Settings
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-0123456789abcdef0123")
os.environ.setdefault(
    "FIREBASE_CREDENTIALS", '{"type":"service_account","project_id":"test"}'
)

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from services.base import DocumentStore  # noqa: E402
from services.types import AuthenticatedUser, Document  # noqa: E402


class InMemoryDocumentStore(DocumentStore):
    """Owner-scoped store over a plain dict, for handler tests."""

    def __init__(self, documents: list[Document] | None = None) -> None:
        self.documents = {d.id: d for d in documents or []}

    async def get_document(self, doc_id, owner_id):
        doc = self.documents.get(doc_id)
        if doc is None or doc.user_id != owner_id:
            return None
        return doc

    async def update_document(self, doc_id, owner_id, content):
        doc = await self.get_document(doc_id, owner_id)
        if doc is None:
            return None
        updated = doc.model_copy(
            update={"content": content, "updated_at": datetime.now(UTC)}
        )
        self.documents[doc_id] = updated
        return updated

    async def delete_document(self, doc_id, owner_id):
        if await self.get_document(doc_id, owner_id) is None:
            return False
        del self.documents[doc_id]
        return True


@pytest.fixture
def mock_settings():
    """Mock application settings."""
    settings = MagicMock()
    settings.jwt_secret = "test-jwt-secret-0123456789abcdef0123"
    settings.jwt_algorithm = "HS256"
    settings.auth_cookie_name = "auth_token"
    settings.documents_collection = "documents"
    settings.users_collection = "users"
    settings.environment = "test"
    settings.debug = True
    settings.log_level = "DEBUG"
    return settings


@pytest.fixture
def sample_user():
    """Authenticated owner of the sample document."""
    return AuthenticatedUser(id="u1", email="u1@example.com")


@pytest.fixture
def other_user():
    """Authenticated user who owns nothing."""
    return AuthenticatedUser(id="u2", email="u2@example.com")


@pytest.fixture
def sample_document():
    """Document doc1 owned by u1."""
    return Document(
        id="doc1",
        user_id="u1",
        content="Original content",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        updated_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.fixture
def mock_verifier(sample_user):
    """Token verifier accepting any token as the sample user."""
    verifier = AsyncMock()
    verifier.verify_token.return_value = sample_user
    return verifier


@pytest.fixture
def mock_store(sample_document):
    """Document store mock that owns and mutates doc1 successfully."""
    store = AsyncMock()
    store.get_document.return_value = sample_document
    store.delete_document.return_value = True
    store.update_document.return_value = sample_document.model_copy(
        update={"content": "New content"}
    )
    return store


@pytest.fixture
def memory_store(sample_document):
    """In-memory store holding doc1 for u1."""
    return InMemoryDocumentStore([sample_document])


@pytest.fixture
def mock_firestore():
    """Firestore service whose collection().document() refs are async mocks."""
    service = MagicMock()
    doc_ref = MagicMock()
    doc_ref.get = AsyncMock()
    doc_ref.set = AsyncMock()
    doc_ref.delete = AsyncMock()
    service.collection.return_value.document.return_value = doc_ref
    service.doc_ref = doc_ref
    return service


def make_snapshot(doc_id: str, data: dict | None):
    """Build a Firestore-like document snapshot."""
    snapshot = MagicMock()
    snapshot.id = doc_id
    snapshot.exists = data is not None
    snapshot.to_dict.return_value = data
    return snapshot


@pytest.fixture
def snapshot():
    """Factory for Firestore-like snapshots."""
    return make_snapshot

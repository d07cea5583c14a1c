"""FastAPI dependency injection for services.

Collaborators of the document handler are resolved here so tests can swap
them with app.dependency_overrides.
Services are cached with @lru_cache() to avoid recreation per request.
"""

from functools import lru_cache

from fastapi import Depends

from config import get_settings
from db import FirestoreDocumentStore, FirestoreService, FirestoreUserRepository
from apps.auth.verifier import JWTTokenVerifier
from services.base import DocumentStore, TokenVerifier

# --- Cached Singletons ---
# These are created once and reused across all requests


@lru_cache
def get_firestore_service() -> FirestoreService:
    """Get cached Firestore service (expensive - has API client)."""
    return FirestoreService()


# --- Composed Services ---
# Use Depends() for proper FastAPI DI chaining


def get_document_store(
    firestore_service: FirestoreService = Depends(get_firestore_service),
) -> DocumentStore:
    """Get the owner-scoped document store."""
    return FirestoreDocumentStore(
        firestore_service, collection=get_settings().documents_collection
    )


def get_token_verifier(
    firestore_service: FirestoreService = Depends(get_firestore_service),
) -> TokenVerifier:
    """Get the auth token verifier.

    FastAPI will automatically inject the cached Firestore service.
    """
    settings = get_settings()
    users = FirestoreUserRepository(
        firestore_service, collection=settings.users_collection
    )
    return JWTTokenVerifier(
        users, secret=settings.jwt_secret, algorithm=settings.jwt_algorithm
    )

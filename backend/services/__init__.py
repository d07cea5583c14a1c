"""Services module for the document action handler.

Contains the collaborator contracts and shared types:
- Token verification
- Owner-scoped document storage

Note: Service instances are managed via dependencies.py using FastAPI DI.
"""

from services.base import (
    DocumentStore,
    DocumentStoreError,
    TokenVerifier,
    UserRepositoryError,
)
from services.types import AuthenticatedUser, Document, UpdateDocumentRequest

__all__ = [
    "AuthenticatedUser",
    "Document",
    "DocumentStore",
    "DocumentStoreError",
    "TokenVerifier",
    "UpdateDocumentRequest",
    "UserRepositoryError",
]

"""Firestore persistence layer."""

from db.documents import FirestoreDocumentStore
from db.firestore import FirestoreService
from db.users import FirestoreUserRepository

__all__ = ["FirestoreDocumentStore", "FirestoreService", "FirestoreUserRepository"]

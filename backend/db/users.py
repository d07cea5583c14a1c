"""Firestore-backed user lookup used by token verification."""

import logging

from google.api_core.exceptions import GoogleAPICallError

from db.firestore import FirestoreService
from services.base import UserRepositoryError
from services.types import AuthenticatedUser

logger = logging.getLogger(__name__)


class FirestoreUserRepository:
    """Reads user records from the users collection."""

    def __init__(
        self, firestore_service: FirestoreService, collection: str = "users"
    ) -> None:
        self.firestore = firestore_service
        self.collection_name = collection

    async def get_user(self, user_id: str) -> AuthenticatedUser | None:
        """Get a user by id, or None if no record exists."""
        try:
            snapshot = (
                await self.firestore.collection(self.collection_name)
                .document(user_id)
                .get()
            )
        except GoogleAPICallError as e:
            raise UserRepositoryError(f"Failed to read user {user_id}") from e

        if not snapshot.exists:
            return None

        data = snapshot.to_dict() or {}
        return AuthenticatedUser(id=snapshot.id, email=data.get("email"))

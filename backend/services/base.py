"""Collaborator interfaces for the document handler.

Defines the contracts that token verifiers and document stores must implement.
"""

from abc import ABC, abstractmethod

from services.types import AuthenticatedUser, Document


class DocumentStoreError(Exception):
    """Raised when the document store cannot complete an operation."""


class UserRepositoryError(Exception):
    """Raised when a user record cannot be read."""


class TokenVerifier(ABC):
    """Exchanges an auth token for a user identity."""

    @abstractmethod
    async def verify_token(self, token: str) -> AuthenticatedUser | None:
        """Verify a token.

        Args:
            token: Raw token taken from the auth cookie.

        Returns:
            The authenticated user, or None if the token is rejected.
        """


class DocumentStore(ABC):
    """Document persistence scoped by (document id, owner id).

    Every operation returns a result only when the document exists and
    belongs to ``owner_id``.
    """

    @abstractmethod
    async def get_document(self, doc_id: str, owner_id: str) -> Document | None:
        """Fetch a document owned by ``owner_id``."""

    @abstractmethod
    async def update_document(
        self, doc_id: str, owner_id: str, content: str
    ) -> Document | None:
        """Replace the content of a document owned by ``owner_id``.

        Returns:
            The updated document, or None if nothing was updated.
        """

    @abstractmethod
    async def delete_document(self, doc_id: str, owner_id: str) -> bool:
        """Delete a document owned by ``owner_id``.

        Returns:
            True if the document was deleted.
        """

"""Firestore-backed document store.

Every read and write is scoped by (doc_id, owner_id): a document whose
`userId` differs from the caller is treated exactly like a missing one.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from google.api_core.exceptions import GoogleAPICallError

from db.firestore import FirestoreService
from services.base import DocumentStore, DocumentStoreError
from services.types import Document

logger = logging.getLogger(__name__)


def _to_document(doc_id: str, data: dict[str, Any]) -> Document:
    return Document(
        id=doc_id,
        user_id=data["userId"],
        content=data.get("content") or "",
        created_at=data.get("createdAt"),
        updated_at=data.get("updatedAt"),
    )


class FirestoreDocumentStore(DocumentStore):
    """Owner-scoped CRUD over the documents collection."""

    def __init__(
        self, firestore_service: FirestoreService, collection: str = "documents"
    ) -> None:
        self.firestore = firestore_service
        self.collection_name = collection

    def _ref(self, doc_id: str):
        return self.firestore.collection(self.collection_name).document(doc_id)

    async def _get_owned(self, doc_id: str, owner_id: str) -> dict[str, Any] | None:
        try:
            snapshot = await self._ref(doc_id).get()
        except GoogleAPICallError as e:
            raise DocumentStoreError(f"Failed to read document {doc_id}") from e

        if not snapshot.exists:
            return None

        data = snapshot.to_dict() or {}
        if data.get("userId") != owner_id:
            logger.debug("Document %s not owned by %s", doc_id, owner_id)
            return None
        return data

    async def get_document(self, doc_id: str, owner_id: str) -> Document | None:
        data = await self._get_owned(doc_id, owner_id)
        if data is None:
            return None
        return _to_document(doc_id, data)

    async def update_document(
        self, doc_id: str, owner_id: str, content: str
    ) -> Document | None:
        data = await self._get_owned(doc_id, owner_id)
        if data is None:
            return None

        changes = {"content": content, "updatedAt": datetime.now(UTC)}
        try:
            await self._ref(doc_id).set(changes, merge=True)
        except GoogleAPICallError as e:
            raise DocumentStoreError(f"Failed to update document {doc_id}") from e

        logger.info("Updated document %s (%d chars)", doc_id, len(content))
        return _to_document(doc_id, {**data, **changes})

    async def delete_document(self, doc_id: str, owner_id: str) -> bool:
        data = await self._get_owned(doc_id, owner_id)
        if data is None:
            return False

        try:
            await self._ref(doc_id).delete()
        except GoogleAPICallError as e:
            logger.error("Failed to delete document %s: %s", doc_id, e)
            return False

        logger.info("Deleted document %s", doc_id)
        return True

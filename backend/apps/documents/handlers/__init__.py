"""Document handlers."""

from apps.documents.handlers.document_action import (
    document_action,
    document_action_without_id,
    handle_document_action,
)

__all__ = [
    "document_action",
    "document_action_without_id",
    "handle_document_action",
]

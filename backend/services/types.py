"""Shared types for services.

Provides typed alternatives to dict[str, Any] for better type safety.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictStr


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from a verified auth token."""

    id: str
    email: str | None = None


class Document(BaseModel):
    """A stored document owned by a single user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(..., alias="userId")
    content: str = ""
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    def to_response(self) -> dict:
        """Serialize with the public camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


class UpdateDocumentRequest(BaseModel):
    """Body accepted by PUT /documents/{doc_id}."""

    content: StrictStr = Field(..., min_length=1, description="New document content")

"""DELETE | PUT /documents/{doc_id} - Delete or update an owned document."""

import logging
import uuid

from fastapi import Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from apps.auth.helpers import AUTH_COOKIE_NAME, get_auth_token
from config import get_settings
from dependencies import get_document_store, get_token_verifier
from responses import ResponseCode, error_response, success_response
from services.base import DocumentStore, TokenVerifier
from services.types import UpdateDocumentRequest

logger = logging.getLogger(__name__)


async def handle_document_action(
    request: Request,
    doc_id: str | None,
    verifier: TokenVerifier,
    store: DocumentStore,
    cookie_name: str = AUTH_COOKIE_NAME,
) -> JSONResponse:
    """Authenticate the caller, check ownership, then delete or update.

    Flow:
    1. Require a document id
    2. Read the auth token from the Cookie header
    3. Verify the token
    4. Load the document scoped to the caller (404 if absent or not owned)
    5. Dispatch on method
    """
    request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())[:8]

    if not doc_id:
        return error_response(ResponseCode.BAD_REQUEST, "Document ID is required")

    token = get_auth_token(request.headers.get("cookie"), cookie_name)
    if not token:
        return error_response(ResponseCode.UNAUTHENTICATED, "Not authenticated")

    try:
        user = await verifier.verify_token(token)
        if not user:
            return error_response(ResponseCode.INVALID_AUTH, "Invalid authentication")

        document = await store.get_document(doc_id, user.id)
        if not document:
            logger.info("[%s] Doc %s not found for user %s", request_id, doc_id, user.id)
            return error_response(ResponseCode.NOT_FOUND, "Document not found")

        if request.method == "DELETE":
            deleted = await store.delete_document(doc_id, user.id)
            if not deleted:
                logger.error("[%s] Delete failed for doc: %s", request_id, doc_id)
                return error_response(
                    ResponseCode.INTERNAL_ERROR, "Failed to delete document"
                )
            logger.info("[%s] Deleted doc: %s", request_id, doc_id)
            return success_response()

        if request.method == "PUT":
            payload = await request.json()
            try:
                body = UpdateDocumentRequest.model_validate(payload)
            except ValidationError:
                return error_response(ResponseCode.BAD_REQUEST, "Content is required")

            updated = await store.update_document(doc_id, user.id, body.content)
            if not updated:
                logger.error("[%s] Update failed for doc: %s", request_id, doc_id)
                return error_response(
                    ResponseCode.INTERNAL_ERROR, "Failed to update document"
                )
            logger.info("[%s] Updated doc: %s", request_id, doc_id)
            return success_response(document=updated.to_response())

        return error_response(ResponseCode.METHOD_NOT_ALLOWED, "Method not allowed")

    except Exception:
        logger.exception("[%s] Error handling document %s", request_id, doc_id)
        return error_response(ResponseCode.INTERNAL_ERROR, "Failed to process document")


# --- Route handlers ---


async def document_action(
    request: Request,
    doc_id: str,
    verifier: TokenVerifier = Depends(get_token_verifier),
    store: DocumentStore = Depends(get_document_store),
) -> JSONResponse:
    """Delete (DELETE) or replace the content of (PUT) a document you own."""
    return await handle_document_action(
        request, doc_id, verifier, store, get_settings().auth_cookie_name
    )


async def document_action_without_id(
    request: Request,
    verifier: TokenVerifier = Depends(get_token_verifier),
    store: DocumentStore = Depends(get_document_store),
) -> JSONResponse:
    """Reject document actions that omit the document id."""
    return await handle_document_action(
        request, None, verifier, store, get_settings().auth_cookie_name
    )

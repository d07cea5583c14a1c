"""Document routes - registers all document endpoints."""

from fastapi import APIRouter

from apps.documents.handlers import document_action, document_action_without_id

router = APIRouter(prefix="/documents", tags=["Documents"])

# Other verbs reach the handler so it can answer 405 after the ownership check
ACTION_METHODS = ["DELETE", "PUT", "GET", "POST", "PATCH", "OPTIONS", "HEAD"]

# DELETE | PUT /documents/{doc_id} - Delete or update document
router.api_route("/{doc_id}", methods=ACTION_METHODS)(document_action)

# DELETE | PUT /documents and /documents/ - Missing document id
for path in ("", "/"):
    router.api_route(path, methods=ACTION_METHODS, include_in_schema=False)(
        document_action_without_id
    )

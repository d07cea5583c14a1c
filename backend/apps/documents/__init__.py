"""Documents module - owner-scoped update and delete."""

from apps.documents.routes import router

__all__ = ["router"]

"""Firestore client shared by the document store and user repository.

Collections:
- `documents/{doc_id}` - document content keyed by id, owned via `userId`
- `users/{user_id}` - user records resolved from auth token subjects
"""

import base64
import json
import logging
import os
import time
from datetime import UTC, datetime
from typing import Any

import firebase_admin
from firebase_admin import credentials
from google.cloud.firestore_v1 import AsyncClient, AsyncCollectionReference
from google.oauth2 import service_account

from config import get_settings

logger = logging.getLogger(__name__)


def _load_firebase_credentials(creds_value: str) -> dict:
    """Load Firebase credentials from JSON string, file path, or base64."""
    if os.path.isfile(creds_value):
        with open(creds_value) as f:
            return json.load(f)

    try:
        return json.loads(creds_value)
    except json.JSONDecodeError:
        pass

    try:
        decoded = base64.b64decode(creds_value, validate=True).decode("utf-8")
        return json.loads(decoded)
    except (ValueError, UnicodeDecodeError):
        pass

    raise ValueError("FIREBASE_CREDENTIALS is not valid JSON, file path, or base64")


class FirestoreService:
    """Owns the process-wide async Firestore client."""

    _initialized: bool = False
    _db: AsyncClient | None = None

    def __init__(self, db: AsyncClient | None = None) -> None:
        """Initialize Firestore client (singleton pattern).

        Args:
            db: Pre-built client, bypassing credential loading.
        """
        if db is not None:
            self.db = db
            return

        if FirestoreService._initialized:
            self.db = FirestoreService._db
            return

        settings = get_settings()

        try:
            creds_dict = _load_firebase_credentials(settings.firebase_credentials)

            if not firebase_admin._apps:
                cred = credentials.Certificate(creds_dict)
                firebase_admin.initialize_app(cred)

            gcp_credentials = service_account.Credentials.from_service_account_info(
                creds_dict
            )

            FirestoreService._db = AsyncClient(
                project=creds_dict.get("project_id"),
                credentials=gcp_credentials,
            )
            self.db = FirestoreService._db

            FirestoreService._initialized = True
            logger.info("Firestore client initialized successfully")
        except Exception as e:
            logger.error("Failed to initialize Firestore: %s", e)
            raise

    def collection(self, name: str) -> AsyncCollectionReference:
        """Get a collection reference by name."""
        return self.db.collection(name)

    async def health_check(self) -> dict[str, Any]:
        """Check Firestore connection health."""
        start = time.time()
        try:
            test_ref = self.db.collection("_health_check").document("test")
            await test_ref.set({"timestamp": datetime.now(UTC)})
            await test_ref.get()

            latency = (time.time() - start) * 1000
            return {"status": "healthy", "latency_ms": round(latency, 2)}
        except Exception as e:
            logger.warning("Firestore health check failed: %s", e)
            return {"status": "unhealthy", "error": str(e)}

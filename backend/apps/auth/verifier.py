"""JWT verification for the auth cookie.

Tokens are HS256 JWTs whose `sub` claim is a user id in Firestore.
"""

import logging

import jwt

from db.users import FirestoreUserRepository
from services.base import TokenVerifier
from services.types import AuthenticatedUser

logger = logging.getLogger(__name__)


class JWTTokenVerifier(TokenVerifier):
    """Verifies signed tokens and resolves their subject to a user."""

    def __init__(
        self,
        user_repository: FirestoreUserRepository,
        secret: str,
        algorithm: str = "HS256",
    ) -> None:
        self.users = user_repository
        self.secret = secret
        self.algorithm = algorithm

    def decode(self, token: str) -> str | None:
        """Decode a token and return its subject, or None if it is rejected."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning("Rejected invalid token: %s", e)
            return None

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            return None
        return subject

    async def verify_token(self, token: str) -> AuthenticatedUser | None:
        user_id = self.decode(token)
        if user_id is None:
            return None

        user = await self.users.get_user(user_id)
        if user is None:
            logger.warning("Token subject %s has no user record", user_id)
        return user

"""Auth cookie parsing and token verification."""

from apps.auth.helpers import AUTH_COOKIE_NAME, get_auth_token, parse_cookie_header
from apps.auth.verifier import JWTTokenVerifier

__all__ = [
    "AUTH_COOKIE_NAME",
    "JWTTokenVerifier",
    "get_auth_token",
    "parse_cookie_header",
]

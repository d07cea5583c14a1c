"""Tests for auth cookie parsing and JWT verification."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import jwt
import pytest

from apps.auth.helpers import get_auth_token, parse_cookie_header
from apps.auth.verifier import JWTTokenVerifier
from services.base import UserRepositoryError
from services.types import AuthenticatedUser

SECRET = "test-jwt-secret-0123456789abcdef0123"


def make_token(sub="u1", secret=SECRET, expires_in=3600, **claims):
    payload = {"exp": datetime.now(UTC) + timedelta(seconds=expires_in), **claims}
    if sub is not None:
        payload["sub"] = sub
    return jwt.encode(payload, secret, algorithm="HS256")


class TestParseCookieHeader:
    """Tests for parse_cookie_header."""

    def test_empty_header(self):
        assert parse_cookie_header("") == {}
        assert parse_cookie_header(None) == {}

    def test_multiple_cookies(self):
        """Test pairs split on '; '."""
        result = parse_cookie_header("a=1; auth_token=xyz; b=2")
        assert result == {"a": "1", "auth_token": "xyz", "b": "2"}

    def test_values_are_url_decoded(self):
        result = parse_cookie_header("name=hello%20world%21")
        assert result["name"] == "hello world!"

    def test_value_keeps_equals_signs(self):
        """Test only the first '=' separates name from value."""
        result = parse_cookie_header("auth_token=abc==")
        assert result["auth_token"] == "abc=="

    def test_part_without_equals_is_skipped(self):
        result = parse_cookie_header("flag; auth_token=t")
        assert result == {"auth_token": "t"}

    def test_last_duplicate_wins(self):
        result = parse_cookie_header("auth_token=old; auth_token=new")
        assert result["auth_token"] == "new"


class TestGetAuthToken:
    """Tests for get_auth_token."""

    def test_present(self):
        assert get_auth_token("x=1; auth_token=tok") == "tok"

    def test_missing(self):
        assert get_auth_token("x=1") is None

    def test_empty_value(self):
        assert get_auth_token("auth_token=") is None

    def test_custom_cookie_name(self):
        assert get_auth_token("session=abc", cookie_name="session") == "abc"


class TestJWTTokenVerifier:
    """Tests for JWTTokenVerifier."""

    def setup_method(self):
        """Set up test fixtures."""
        self.users = AsyncMock()
        self.users.get_user.return_value = AuthenticatedUser(id="u1")
        self.verifier = JWTTokenVerifier(self.users, secret=SECRET)

    @pytest.mark.asyncio
    async def test_valid_token(self):
        """Test a valid token resolves to its user."""
        user = await self.verifier.verify_token(make_token())

        assert user == AuthenticatedUser(id="u1")
        self.users.get_user.assert_awaited_once_with("u1")

    @pytest.mark.asyncio
    async def test_expired_token(self):
        user = await self.verifier.verify_token(make_token(expires_in=-60))

        assert user is None
        self.users.get_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_wrong_signature(self):
        token = make_token(secret="another-secret-0123456789abcdef0123456")

        user = await self.verifier.verify_token(token)

        assert user is None

    @pytest.mark.asyncio
    async def test_garbage_token(self):
        assert await self.verifier.verify_token("not-a-jwt") is None

    @pytest.mark.asyncio
    async def test_missing_subject(self):
        """Test tokens without a subject are rejected."""
        assert await self.verifier.verify_token(make_token(sub=None)) is None

    @pytest.mark.asyncio
    async def test_missing_expiry(self):
        token = jwt.encode({"sub": "u1"}, SECRET, algorithm="HS256")

        assert await self.verifier.verify_token(token) is None

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        """Test a valid token for a deleted user is rejected."""
        self.users.get_user.return_value = None

        assert await self.verifier.verify_token(make_token()) is None

    @pytest.mark.asyncio
    async def test_repository_error_propagates(self):
        self.users.get_user.side_effect = UserRepositoryError("down")

        with pytest.raises(UserRepositoryError):
            await self.verifier.verify_token(make_token())

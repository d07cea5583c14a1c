"""Auth cookie utilities."""

from urllib.parse import unquote

AUTH_COOKIE_NAME = "auth_token"


def parse_cookie_header(header: str | None) -> dict[str, str]:
    """Parse a raw Cookie header into a name -> decoded value mapping.

    Pairs are separated by "; " and split on the first "=". Pairs without
    "=" are skipped; a repeated name keeps its last value.
    """
    cookies: dict[str, str] = {}
    if not header:
        return cookies

    for part in header.split("; "):
        name, sep, value = part.partition("=")
        if not sep:
            continue
        cookies[name] = unquote(value)
    return cookies


def get_auth_token(header: str | None, cookie_name: str = AUTH_COOKIE_NAME) -> str | None:
    """Extract the auth token from a raw Cookie header, if present and non-empty."""
    return parse_cookie_header(header).get(cookie_name) or None

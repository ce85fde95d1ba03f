"""Access token resolution and request header formation."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from ...config import (
    BEARER_PREFIX,
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_PREFER,
    HEADER_USER_METADATA,
    accept_header,
)
from ...core.enums import PreferReturn
from ...core.exceptions import AuthenticationRequiredError

AccessTokenCallback = Callable[[], Awaitable[str]]


def ensure_access_token_provided(
    access_token: str | None, access_token_callback: AccessTokenCallback | None
) -> None:
    """Fail fast when no credential source is available.

    Raises:
        AuthenticationRequiredError: If both the token and the callback are missing
    """
    if not access_token and access_token_callback is None:
        raise AuthenticationRequiredError()


async def resolve_access_token(
    access_token: str | None, access_token_callback: AccessTokenCallback | None
) -> str:
    """Return the explicit token, else the one supplied by the callback.

    Raises:
        AuthenticationRequiredError: If neither source yields a token
    """
    if access_token:
        return access_token
    if access_token_callback is None:
        raise AuthenticationRequiredError()
    token = await access_token_callback()
    if not token:
        raise AuthenticationRequiredError("Access token callback returned an empty token")
    return token


def form_headers(
    *,
    access_token: str,
    api_version: str,
    prefer_return: PreferReturn | None = None,
    user_metadata: bool = False,
    contains_body: bool = False,
) -> dict[str, str]:
    """Build the header set sent with every service request."""
    if not access_token.startswith(BEARER_PREFIX):
        access_token = f"{BEARER_PREFIX}{access_token}"
    headers = {
        HEADER_AUTHORIZATION: access_token,
        HEADER_ACCEPT: accept_header(api_version),
    }
    if prefer_return is not None:
        headers[HEADER_PREFER] = prefer_return.header_value()
    if contains_body:
        headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
    if user_metadata:
        headers[HEADER_USER_METADATA] = "true"
    return headers

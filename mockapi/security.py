"""Bearer header check for protected mock endpoints.

Only the presence of the ``Bearer `` prefix is checked. The token itself is
never decoded or verified.
"""

import logging
from typing import Optional

from fastapi import Header, Request

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class UnauthorizedError(Exception):
    """Raised when a request lacks a bearer Authorization header."""

    message = "Unauthorized"


def has_bearer_prefix(authorization: Optional[str]) -> bool:
    """Return True if the header value is present and starts with ``Bearer ``."""
    return bool(authorization) and authorization.startswith(BEARER_PREFIX)


async def require_bearer_token(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> str:
    """FastAPI dependency returning the raw Authorization header value."""
    logger.info(f"{request.url.path} request with headers: {dict(request.headers)}")

    if not has_bearer_prefix(authorization):
        raise UnauthorizedError()

    logger.info(f"Auth token: {authorization}")
    return authorization

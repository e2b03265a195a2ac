"""Authentication routes. Every login succeeds."""

import json
import logging

from fastapi import APIRouter, Request, status

from mockapi.fixtures import ACCESS_TOKEN, USER_ID, USER_ROLE, USERNAME
from mockapi.models import LoginResponse, User

logger = logging.getLogger(__name__)
router = APIRouter()


JSON_MEDIA_TYPE = "application/json"


async def read_json_object(request: Request) -> dict:
    """Parse a JSON request body as an object, falling back to ``{}``.

    Bodies sent with another content type are ignored.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except (UnicodeDecodeError, ValueError, RecursionError):
        logger.debug("Login body is not usable JSON, treating it as empty")
        return {}
    return body if isinstance(body, dict) else {}


@router.post(
    "/login",
    response_model=LoginResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def login(request: Request):
    """Return the fixed token and a canned user carrying the submitted email."""
    body = await read_json_object(request)
    logger.info(f"Login request: {body}")

    user_fields = {"id": USER_ID, "username": USERNAME, "role": USER_ROLE}
    if "email" in body:
        user_fields["email"] = body["email"]

    return LoginResponse(access_token=ACCESS_TOKEN, user=User(**user_fields))

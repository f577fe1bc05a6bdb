from __future__ import annotations

import hmac
import logging

from fastapi import Header, Query

from people_api.core.config import settings
from people_api.core.errors import unauthorized

logger = logging.getLogger(__name__)

SECRET_KEY_NAME = "x-secret-key"


async def verify_secret_key(
    header_key: str | None = Header(None, alias=SECRET_KEY_NAME),
    query_key: str | None = Query(None, alias=SECRET_KEY_NAME),
) -> None:
    supplied = header_key if header_key is not None else query_key
    expected = settings.API_SECRET_KEY

    if not expected:
        logger.warning("API_SECRET_KEY is not configured, rejecting request")
        raise unauthorized()

    if supplied is None or not hmac.compare_digest(supplied.encode(), expected.encode()):
        raise unauthorized()

"""
Exercise Tracker API - FastAPI Dependencies.

Request parsing helpers for routes. Bodies may be JSON or HTML form posts.
"""

import logging
from typing import Any, Dict

from fastapi import HTTPException, Request, status

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = (
    "application/x-www-form-urlencoded",
    "multipart/form-data",
)


async def read_body(request: Request) -> Dict[str, Any]:
    """
    Read the request body as a flat dict.

    Args:
        request: Incoming request.

    Returns:
        Dict[str, Any]: Submitted fields; empty when there is no body or
        the content type is not JSON or a form.

    Raises:
        HTTPException: 400 if a JSON body cannot be decoded.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = await request.json()
        except ValueError as e:
            logger.warning(f"Rejected malformed JSON body on {request.url.path}: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Malformed JSON body"
            )
        return data if isinstance(data, dict) else {}

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    return {}
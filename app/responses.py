# =============================================================================
# app/responses.py - JSON Response Helper
# =============================================================================
# Every successful body is serialized here. Gist content can hold values that
# are not strict JSON (NaN, Infinity); if serialization fails the client gets
# a fixed 500 body instead of a broken document.
# =============================================================================

import json
import logging
from typing import Any

from fastapi import Response, status
from pydantic import BaseModel

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
SERIALIZATION_ERROR_BODY = '{"error": "Error serializing response"}'


def json_response(payload: BaseModel | Any, status_code: int = status.HTTP_200_OK) -> Response:
    """
    Serialize a payload as a JSON response.

    Returns:
        Response with the payload and `status_code`, or a 500 with
        SERIALIZATION_ERROR_BODY if the payload is not valid JSON.
    """
    data = payload.model_dump() if isinstance(payload, BaseModel) else payload
    try:
        body = json.dumps(data, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.error(f"Error serializing response: {e}")
        return Response(
            content=SERIALIZATION_ERROR_BODY,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            media_type=JSON_MEDIA_TYPE,
        )
    return Response(content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE)

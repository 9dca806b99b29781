import json
from datetime import datetime, date
from typing import Any, Optional

from aws_lambda_powertools import Logger
from pydantic import BaseModel

logger = Logger(service="responses")


class ProxyJSONEncoder(json.JSONEncoder):
    """
    Custom JSON encoder for response bodies.

    Converts:
    - pydantic models to their aliased dict (None fields dropped)
    - datetime/date to ISO 8601 string
    """
    def default(self, obj):
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
        elif isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


ALLOWED_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
ALLOWED_HEADERS = "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"

SERIALIZATION_FAILURE_BODY = '{"error": "SerializationFailure", "message": "Response could not be serialized"}'


def cors_headers(origin: Optional[str] = None) -> dict:
    """Echoes the caller's Origin when present; wildcard otherwise."""
    headers = {
        "Access-Control-Allow-Origin": origin or "*",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }
    if origin:
        headers["Vary"] = "Origin"
    return headers


def http_response(status_code: int, body: Any, origin: Optional[str] = None) -> dict:
    headers = {"Content-Type": "application/json", **cors_headers(origin)}
    try:
        payload = json.dumps(body, cls=ProxyJSONEncoder)
    except (ValueError, TypeError) as e:
        # json raises ValueError on circular references
        logger.error(f"Response serialization failed: {e}")
        status_code = 500
        payload = SERIALIZATION_FAILURE_BODY
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": payload,
    }


def error_response(status_code: int, error: str, message: str, origin: Optional[str] = None) -> dict:
    return http_response(status_code, {"error": error, "message": message}, origin=origin)


def options_response(origin: Optional[str] = None) -> dict:
    """Preflight short-circuit: fixed success body, no upstream call."""
    return http_response(200, {"message": "CORS preflight successful"}, origin=origin)

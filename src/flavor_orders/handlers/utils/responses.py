"""
API Gateway proxy response builder.

Every handler returns through build_response so that status codes, headers and
JSON serialization are uniform across the Lambda functions.
"""

import json
from typing import Any, Dict, Optional

from pydantic_core import to_jsonable_python

DEFAULT_HEADERS = {
    'Content-Type': 'application/json',
}


def build_response(
    status_code: int,
    payload: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """
    Create an API Gateway proxy response.

    Args:
        status_code: HTTP status code
        payload: Optional object to serialize as the JSON body. Pydantic models are
            dumped by alias so wire keys match the stored attribute names.
        headers: Extra headers merged over the defaults

    Returns:
        Dictionary with ``statusCode``, ``headers`` and, when a payload was given, ``body``
    """
    response: Dict[str, Any] = {
        'statusCode': int(status_code),
        'headers': {**DEFAULT_HEADERS, **(headers or {})},
    }

    if payload is not None:
        response['body'] = json.dumps(to_jsonable_python(payload, by_alias=True))

    return response

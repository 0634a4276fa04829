"""
Request accessors over the Powertools API Gateway proxy event.

``pathParameters`` and ``body`` may both be absent or null in the incoming event.
"""

import binascii
from typing import Optional

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent


class UndecodableBodyError(ValueError):
    """Raised when a base64 encoded body is not valid base64 or not UTF-8 text."""


def get_path_parameter(event: APIGatewayProxyEvent, name: str) -> Optional[str]:
    """Return a path parameter, or None when it is missing or empty."""
    return (event.path_parameters or {}).get(name) or None


def get_body(event: APIGatewayProxyEvent) -> Optional[str]:
    """
    Return the request body, decoded if API Gateway base64 encoded it.

    Raises:
        UndecodableBodyError: If the encoded body cannot be decoded
    """
    if not event.body:
        return None

    try:
        return event.decoded_body
    except (binascii.Error, UnicodeDecodeError) as e:
        raise UndecodableBodyError('Request body is not valid base64 encoded UTF-8') from e

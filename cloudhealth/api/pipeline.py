"""
Request pipeline shared by every CloudHealth resource.

One call to :func:`execute` is exactly one HTTP round trip: the body is
fully buffered, the response is always closed, and the status code is
mapped to either the raw body bytes or a named exception.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import (
    AuthenticationError,
    DecodeError,
    ForbiddenError,
    HeaderMissingError,
    NotFoundError,
    TooManyRequestsError,
    TransportError,
    UnknownResponseError,
    UnprocessableEntityError,
    ValidationError,
)
from .models import JSONSerializable

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})

STATUS_ERRORS = {
    400: HeaderMissingError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableEntityError,
    429: TooManyRequestsError,
}


class AuthStyle(Enum):
    """How the credential travels: newer v1/v2 endpoints take a header, legacy ones a query parameter."""

    HEADER = "header"
    QUERY = "query"


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    path: str
    body: Optional[JSONSerializable] = None
    auth: AuthStyle = AuthStyle.HEADER


@dataclass(frozen=True)
class HttpRequest:
    method: str
    url: str
    headers: Dict[str, str]
    params: Optional[Dict[str, str]] = None
    data: Optional[bytes] = None


def encode_body(body):
    """
    Encode a request body as canonical JSON.

    Args:
        body (JSONSerializable): A pydantic model or a plain JSON value

    Returns:
        bytes: Compact UTF-8 JSON with sorted keys; unset model fields are omitted

    Raises:
        ValidationError: If the body cannot be represented as JSON
    """
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True)
    try:
        return json.dumps(body, sort_keys=True, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Request body is not JSON serializable: {e}") from e


def classify_response(status_code, body):
    """Return the body for a success code, raise the matching error otherwise."""
    if status_code in SUCCESS_STATUS_CODES:
        return body

    error_class = STATUS_ERRORS.get(status_code)
    if error_class is None:
        raise UnknownResponseError(status_code)
    raise error_class()


def execute(client, descriptor):
    """
    Execute one request against CloudHealth and classify the result.

    Args:
        client (CloudHealthClient): Client that builds the HTTP request
        descriptor (RequestDescriptor): Method, relative path, body and auth style

    Returns:
        bytes: The response body (empty for 204)

    Raises:
        TransportError: If no complete response could be read
        ResponseError: A subclass matching the non-success status code
    """
    request = client.build_request(descriptor.method, descriptor.path, descriptor.body, descriptor.auth)

    # The URL never carries the credential; query auth goes through params
    logger.debug(f"Making {request.method} request to {request.url}")
    try:
        response = requests.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            params=request.params,
            data=request.data,
            timeout=client.timeout,
            allow_redirects=False
        )
    except requests.exceptions.Timeout as e:
        raise TransportError(f"{request.method} {request.url} timed out after {client.timeout}s", e) from e
    except requests.exceptions.RequestException as e:
        raise TransportError(f"{request.method} {request.url} failed: {type(e).__name__}", e) from e

    try:
        body = response.content
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Failed to read response body from {request.url}: {type(e).__name__}", e) from e
    finally:
        response.close()

    status_code = response.status_code
    if status_code not in SUCCESS_STATUS_CODES:
        logger.warning(f"{request.method} {request.url} returned status {status_code}")
    return classify_response(status_code, body)


def decode(body, model):
    """
    Decode a JSON response body into a pydantic model.

    Raises:
        DecodeError: If the body is not valid JSON or does not match the model
    """
    try:
        return model.model_validate_json(body)
    except PydanticValidationError as e:
        logger.error(f"Could not decode {model.__name__} from response: {e.error_count()} error(s)")
        raise DecodeError(f"Unexpected {model.__name__} response from CloudHealth: {e}") from e

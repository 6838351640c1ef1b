"""Decoding of the dog API response envelope.

Every response of the dog API is a JSON object of the form
`{"message": ..., "status": ...}`. A `status` other than "success" means
the call failed and `message` holds the error text, whatever the HTTP
status code of the response was. On success the type of `message` depends
on the endpoint: a string, an array of strings or an object of arrays.

"""

import json
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from dog_ceo_errors import ApiError, DecodeError

logger = logging.getLogger(__name__)

STATUS_SUCCESS = 'success'

# Used when the response lacks a usable error text
FALLBACK_MESSAGE = 'Something went wrong while reading json'


class PayloadShape(Enum):
    """Expected JSON type of the `message` field of a successful response."""
    STRING = 'string'
    STRING_ARRAY = 'string_array'
    OPTIONAL_STRING_ARRAY = 'optional_string_array'
    STRING_TO_OPTIONAL_STRING_ARRAY_MAP = 'string_to_optional_string_array_map'


class Envelope(BaseModel):
    """A response whose `message` is always a string."""

    model_config = ConfigDict(strict=True)

    message: str
    status: str


def _parse_json(body: str) -> Any:
    """Internal helper to parse a response body into a JSON tree.

    Raises:
        DecodeError: the body is not valid JSON.
    """
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        logger.debug('Response body is not valid JSON: %s', e)
        raise DecodeError(f'{FALLBACK_MESSAGE}: {e}') from e


def decode_fixed(body: str) -> str:
    """Decode a response whose `message` field is always a string.

    Args:
        body (str): The response body.

    Returns:
        str: The `message` of a successful response.

    Raises:
        DecodeError: the body is not JSON or either field is missing
            or not a string.
        ApiError: the response reports a failure.
    """
    tree = _parse_json(body)
    try:
        envelope = Envelope.model_validate(tree)
    except ValidationError as e:
        logger.debug('Unexpected response structure: %s', e)
        raise DecodeError(f'{FALLBACK_MESSAGE}: {e}') from e
    if envelope.status != STATUS_SUCCESS:
        raise ApiError(envelope.message)
    return envelope.message


def decode_dynamic(body: str, shape: PayloadShape) -> Any:
    """Decode a response whose `message` type varies between success
    and failure.

    Args:
        body (str): The response body.
        shape (PayloadShape): The expected type of `message` on success.

    Returns:
        Any: `message` projected to `shape`: `str`, `list[str]`,
            `list[str] | None` or `dict[str, list[str] | None]`.

    Raises:
        DecodeError: the body is not JSON, `status` is missing or not
            a string, or `message` does not match `shape`.
        ApiError: the response reports a failure.
    """
    tree = _parse_json(body)
    if not isinstance(tree, dict):
        raise DecodeError(FALLBACK_MESSAGE)
    status = tree.get('status')
    if not isinstance(status, str):
        raise DecodeError(FALLBACK_MESSAGE)

    if status != STATUS_SUCCESS:
        message = tree.get('message')
        if not isinstance(message, str):
            message = FALLBACK_MESSAGE
        raise ApiError(message)

    if 'message' not in tree:
        raise DecodeError(FALLBACK_MESSAGE)
    return project(tree['message'], shape)


def project(message: Any, shape: PayloadShape) -> Any:
    """Convert the `message` of a successful response to `shape`.

    Array elements which are not strings are skipped, and so are
    catalog entries whose value is not an array.

    Raises:
        DecodeError: `message` has the wrong JSON type for `shape`.
    """
    match shape:
        case PayloadShape.STRING:
            if not isinstance(message, str):
                raise DecodeError(FALLBACK_MESSAGE)
            return message
        case PayloadShape.STRING_ARRAY:
            return _collect_strings(_require_array(message))
        case PayloadShape.OPTIONAL_STRING_ARRAY:
            return _optional_strings(_require_array(message))
        case PayloadShape.STRING_TO_OPTIONAL_STRING_ARRAY_MAP:
            if not isinstance(message, dict):
                raise DecodeError(FALLBACK_MESSAGE)
            return {
                key: _optional_strings(value)
                for key, value in message.items()
                if isinstance(value, list)
            }
    raise ValueError(f'Unknown payload shape: {shape!r}')


def _require_array(message: Any) -> list[Any]:
    if not isinstance(message, list):
        raise DecodeError(FALLBACK_MESSAGE)
    return message


def _collect_strings(array: list[Any]) -> list[str]:
    result = [item for item in array if isinstance(item, str)]
    if len(result) != len(array):
        logger.debug('Skipped %d non-string elements', len(array) - len(result))
    return result


def _optional_strings(array: list[Any]) -> list[str] | None:
    """An empty array means "nothing here", not an empty list."""
    if not array:
        return None
    return _collect_strings(array)

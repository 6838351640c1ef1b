"""This module contains definitions of errors raised while communicating
with the dog API.

All of them derive from `DogApiError`, so a caller can handle every
failure with a single `except` clause and still tell them apart by `kind`.
"""

from enum import Enum


class ErrorKind(Enum):
    """Stage of an API call at which a failure occurred."""
    TRANSPORT = 'transport'
    DECODE = 'decode'
    API = 'api'


class DogApiError(Exception):
    """A failed call to the dog API."""

    def __init__(self, kind: ErrorKind, message: str):
        """Initialize an error instance.

        Args:
            kind (ErrorKind): The stage at which the call failed.
            message (str): Human-readable error text.
        """
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.kind.value!r}, {self.message!r})'


class TransportError(DogApiError):
    """Connection, TLS handshake or body read failure."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.TRANSPORT, message)


class DecodeError(DogApiError):
    """The response body is not JSON of the expected shape."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.DECODE, message)


class ApiError(DogApiError):
    """The API reported a failure in the `status` field of its response."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.API, message)

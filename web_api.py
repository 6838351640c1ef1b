"""This module contains the definition of a base class for communicating
Web APIs using HTTP requests.
"""

import logging
from typing import Any

import requests

from dog_ceo_errors import TransportError

logger = logging.getLogger(__name__)


class BasicWebApi:
    """A class which instance communicates with a Web API over a single
    HTTP session.
    """

    def __init__(
        self,
        api_root: str,
        *,
        request_timeout: float | tuple[float, float] | None = None,
        session: requests.Session | None = None
    ):
        """Initialize an API instance.

        Args:
            api_root (str): API root URL. A trailing slash is optional.
            request_timeout (float | tuple[float, float] | None): Timeout
                passed to `requests`. None means the `requests` default,
                which is to wait forever.
            session (requests.Session | None): An HTTP session to send
                requests through. None means a new session is created
                and owned by this instance.
        """
        self._api_root = api_root.rstrip('/')
        self._request_timeout = request_timeout
        self._session = session if session is not None else requests.Session()

    def __enter__(self):
        """Do nothing."""
        return self

    def __exit__(self, exception_type, exception_value, traceback):
        """Close the session."""
        self.close()

    @property
    def api_root(self) -> str:
        """API root URL without a trailing slash."""
        return self._api_root

    def close(self):
        """Close the session."""
        self._session.close()

    def construct_url(self, endpoint: str) -> str:
        """Resolve an endpoint path against the API root URL.

        Args:
            endpoint (str): A path relative to the API root URL.
        """
        return f'{self._api_root}/{endpoint.lstrip("/")}'

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None
    ) -> requests.Response:
        """Perform an HTTP request to API endpoint with parameters.

        The HTTP status code of the response is not checked: it is up to
        the caller to interpret the response.

        Args:
            method (str): A valid HTTP request type.
            endpoint (str): A path relative to the API root URL.
            params (dict[str, Any] | None): Request parameters that
                must be encoded inside request URL.
            headers (dict[str, Any] | None): Additional HTTP headers
                to use in the request.

        Raises:
            TransportError: the request could not be sent or its response
                could not be received.
        """
        url = self.construct_url(endpoint)
        logger.debug('%s %s', method, url)
        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                headers=headers,
                timeout=self._request_timeout
            )
        except requests.RequestException as e:
            logger.debug('Transport failure for %s %s: %s', method, url, e)
            raise TransportError(str(e)) from e
        logger.debug('%s %s -> HTTP %s', method, url, response.status_code)
        return response

    def _get_text(self, endpoint: str) -> str:
        """Perform a GET request and return the whole response body as text.

        Args:
            endpoint (str): A path relative to the API root URL.

        Raises:
            TransportError: the request failed or the body is unreadable.
        """
        response = self._request('GET', endpoint)
        try:
            return response.text
        except (requests.RequestException, UnicodeError) as e:
            raise TransportError(str(e)) from e

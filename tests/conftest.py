from __future__ import annotations

from typing import Any

import pytest
import requests

from dog_ceo_api import DogCeoApi


class FakeResponse:
    """Stands in for `requests.Response`."""

    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Records requests and answers them with queued bodies or errors."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.replies: list[FakeResponse | Exception] = []
        self.closed = False

    def reply(self, text: str, status_code: int = 200) -> None:
        self.replies.append(FakeResponse(text, status_code))

    def fail(self, error: Exception) -> None:
        self.replies.append(error)

    def request(self, **kwargs: Any) -> FakeResponse:
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True

    @property
    def urls(self) -> list[str]:
        return [call['url'] for call in self.calls]


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def api(session: FakeSession) -> DogCeoApi:
    return DogCeoApi(session=session)  # type: ignore[arg-type]


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError('Failed to establish a new connection')

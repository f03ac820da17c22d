from __future__ import annotations

from typing import Dict, List, Optional, Union

import pytest
import requests
from requests.utils import get_encoding_from_headers


def make_response(
    url: str,
    body: bytes,
    status_code: int = 200,
    content_type: str = "application/octet-stream",
) -> requests.Response:
    resp = requests.Response()
    resp.url = url
    resp.status_code = status_code
    resp._content = body
    resp.headers["Content-Type"] = content_type
    resp.encoding = get_encoding_from_headers(resp.headers)
    return resp


class FakeSession:
    """Minimal stand-in for ``requests.Session`` serving canned responses.

    ``str`` routes are served as UTF-8 HTML, ``bytes`` as opaque content,
    ``int`` as an empty response with that status, and exceptions are raised.
    """

    def __init__(
        self,
        routes: Dict[str, Union[bytes, str, int, Exception, requests.Response]],
    ) -> None:
        self.routes = routes
        self.calls: List[str] = []

    def get(self, url: str, timeout: Optional[float] = None) -> requests.Response:
        self.calls.append(url)
        route = self.routes.get(url, 404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, requests.Response):
            return route
        if isinstance(route, int):
            return make_response(url, b"", status_code=route)
        if isinstance(route, str):
            return make_response(
                url, route.encode("utf-8"), content_type="text/html; charset=utf-8"
            )
        return make_response(url, route)


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def response_factory():
    return make_response

from json import dumps, loads
from urllib.parse import urlsplit

from rest_framework.test import APIClient


class ApiClientResponse:
    """The slice of requests.Response that BlogApiClient reads."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.reason = response.reason_phrase
        self.ok = response.status_code < 400

    def json(self):
        return loads(self._response.content)


class ApiClientSession:
    """Stands in for requests.Session, routing calls through the Django test client."""

    def __init__(self):
        self.client = APIClient()
        self.cookies = {}
        self.calls = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        path = urlsplit(url).path
        extra = {"HTTP_" + name.upper().replace("-", "_"): value for name, value in (headers or {}).items()}
        self.calls.append((method, path, extra))
        body = dumps(json) if json is not None else ""
        response = self.client.generic(method, path, data=body, content_type="application/json", **extra)
        return ApiClientResponse(response)

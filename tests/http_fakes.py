from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data=_NO_JSON, content: bytes = b"", reason: str = "OK"):
        self.status_code = status_code
        self._json = json_data
        self.content = content
        self.reason = reason

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._json is _NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._json


class FakeHTTP:
    """Stands in for requests.Session; answers from a url -> response table."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls: list[tuple[str, str, object]] = []

    def _answer(self, method: str, url: str, payload=None):
        self.calls.append((method, url, payload))
        if url not in self.routes:
            return FakeResponse(404, content=b"", reason="Not Found")
        answer = self.routes[url]
        if isinstance(answer, Exception):
            raise answer
        return answer

    def post(self, url, json=None, timeout=None):
        return self._answer("POST", url, json)

    def get(self, url, timeout=None):
        return self._answer("GET", url)

    def urls(self, method: str | None = None) -> list[str]:
        return [url for m, url, _ in self.calls if method is None or m == method]


def image_bytes(fmt: str = "JPEG", size=(40, 20), color=(200, 30, 30)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


def b64_image(fmt: str = "JPEG") -> str:
    return base64.b64encode(image_bytes(fmt)).decode("ascii")

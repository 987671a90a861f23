from typing import Optional, Protocol

import requests
from pydantic import BaseModel


class HttpResponse(BaseModel):
    status: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpTransport(Protocol):
    def get(self, url: str, headers: dict[str, str]) -> HttpResponse: ...

    def post(self, url: str, headers: dict[str, str], body: bytes) -> HttpResponse: ...

    def delete(self, url: str, headers: dict[str, str], body: bytes) -> HttpResponse: ...


class RequestsTransport:
    """Plain requests-backed transport. No retries, no caching."""

    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, url: str, headers: dict[str, str], body: Optional[bytes] = None) -> HttpResponse:
        response = self.session.request(method, url, headers=headers, data=body, timeout=self.timeout)
        return HttpResponse(status=response.status_code, body=response.content)

    def get(self, url: str, headers: dict[str, str]) -> HttpResponse:
        return self._request("GET", url, headers)

    def post(self, url: str, headers: dict[str, str], body: bytes) -> HttpResponse:
        return self._request("POST", url, headers, body)

    def delete(self, url: str, headers: dict[str, str], body: bytes) -> HttpResponse:
        return self._request("DELETE", url, headers, body)

    def close(self) -> None:
        self.session.close()

import json
from pathlib import Path
from typing import Any, Optional

from wikibase_rest.client import HttpResponse

TEST_DATA_JSON_DIR = Path(__file__).parent.parent / "test_data" / "json"
BASE_URL = "https://example.com"
API_URL = f"{BASE_URL}/w/rest.php/wikibase/v0"


def load_json(relative_path: str) -> dict[str, Any]:
    with open(TEST_DATA_JSON_DIR / relative_path) as f:
        return json.load(f)


class FakeTransport:
    """In-memory transport that records every request it receives"""

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self.responses: dict[tuple[str, str], HttpResponse] = {}
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def respond(self, method: str, url: str, status: int = 200, body: Any = b"") -> None:
        if not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        self.responses[(method, url)] = HttpResponse(status=status, body=body)

    def _handle(self, method: str, url: str, headers: dict[str, str], body: Optional[bytes]) -> HttpResponse:
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "json": json.loads(body) if body else None,
            }
        )
        return self.responses.get((method, url), HttpResponse(status=200))

    def get(self, url, headers):
        return self._handle("GET", url, headers, None)

    def post(self, url, headers, body):
        return self._handle("POST", url, headers, body)

    def delete(self, url, headers, body):
        return self._handle("DELETE", url, headers, body)

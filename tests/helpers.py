from __future__ import annotations

import requests

COOKIE = "53616c7465645f5f0123456789abcdef"
PUZZLE_INPUT = b"1000\n2000\n3000\n\n4000\n"


class DummyResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

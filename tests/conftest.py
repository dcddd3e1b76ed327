# tests/conftest.py
# Shared fixtures: scripted generation clients and fake HTTP sessions,
# so nothing here ever touches the network.

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import pytest
import requests

# ---------- Ensure project root is importable ----------
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedClient:
    """Stands in for AIClient: records prompts, returns canned (segment, choices)."""

    def __init__(self, replies: Optional[List[Tuple[str, List[str]]]] = None):
        self.replies = list(replies or [])
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> Tuple[str, List[str]]:
        self.prompts.append(prompt)
        n = len(self.prompts)
        if self.replies:
            return self.replies.pop(0)
        return f"Segment {n}.", [f"Choice {n}a", f"Choice {n}b"]


class FakeResponse:
    def __init__(self, status_code: int = 200, data: Any = None, bad_json: bool = False):
        self.status_code = status_code
        self._data = data
        self._bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._data


class FakeSession:
    """Minimal requests.Session replacement; returns `response` or raises `error`."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


def completion(content: str) -> dict:
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def scripted_client() -> ScriptedClient:
    return ScriptedClient()

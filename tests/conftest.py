"""Pytest configuration and shared fixtures for tracker list tests."""

from __future__ import annotations

from typing import Dict, List

import pytest


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code


class FakeRequests:
    """Records calls and answers from a URL -> (status, body) table."""

    def __init__(self, routes: Dict[str, tuple]) -> None:
        self.routes = routes
        self.calls: List[str] = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        status, body = self.routes[url]
        if isinstance(body, Exception):
            raise body
        return FakeResponse(body, status)


@pytest.fixture
def fake_get(monkeypatch):
    """Patch ``requests.get`` in the HTTP fetcher with a routing table."""

    def install(routes: Dict[str, tuple]) -> FakeRequests:
        fake = FakeRequests(routes)
        monkeypatch.setattr("trackerlist.fetchers.http.requests.get", fake.get)
        return fake

    return install

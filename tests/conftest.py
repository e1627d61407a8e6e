"""Shared fixtures for pricefeed tests."""

from __future__ import annotations

from typing import Callable

import pytest
import requests

SAMPLE_FEED = "2021-01-01,100.0\n2021-01-02 00:00:00,200.5\n"


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.content = text.encode("utf-8")
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def fake_feed(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list]:
    """Serve ``text`` from ``requests.get`` and record the requested URLs."""

    def install(text: str = SAMPLE_FEED, status_code: int = 200) -> list:
        calls: list = []

        def fake_get(url, timeout=None):
            calls.append((url, timeout))
            return FakeResponse(text, status_code)

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return install


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path

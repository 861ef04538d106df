"""Fetching and sending JSON documents over HTTP."""

from __future__ import annotations

import json
import os
import urllib.request
from typing import Any, Protocol


class JsonFetcher(Protocol):
    """Something that can fetch a JSON document from a URL."""

    def fetch_json(self, url: str) -> Any:
        """Return the JSON document found at ``url``."""


class JsonSender(Protocol):
    """Something that can post a JSON document and return the JSON reply."""

    def send_json(self, url: str, payload: Any) -> Any:
        """Post ``payload`` to ``url`` and return the decoded reply."""


class HttpClient:
    """JSON over plain HTTP using the standard library."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def fetch_json(self, url: str) -> Any:
        with urllib.request.urlopen(url, timeout=self.timeout) as response:
            text = response.read().decode("utf-8")
        return json.loads(strip_quotes(text))

    def send_json(self, url: str, payload: Any) -> Any:
        request = urllib.request.Request(
            url,
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        with urllib.request.urlopen(request, timeout=self.timeout) as response:
            return json.loads(response.read().decode("utf-8"))


def rules_url() -> str | None:
    return os.environ.get("STRIKER_URL_RULES")


def charts_url() -> str | None:
    return os.environ.get("STRIKER_URL_CHARTS")


def simulations_url() -> str | None:
    return os.environ.get("STRIKER_URL_SIMULATIONS")


def strip_quotes(text: str) -> str:
    """Undo a JSON document that was sent as an escaped JSON string."""
    return text.strip('"').replace("\\n", "").replace("\\", "")
"""Shared fixtures for Brixie tests."""

import json
from typing import Any, List, Optional

import httpx
import pytest

from brixie.core.client import HttpxTransportFactory, RebrickableClient, StaticKeyProvider


class RecordingHandler:
    """MockTransport handler that records requests and replays one canned outcome."""

    def __init__(
        self,
        status: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        raises: Optional[Exception] = None,
    ):
        self.status = status
        self.json_body = json_body
        self.content = content
        self.raises = raises
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raises is not None:
            raise self.raises
        if self.json_body is not None:
            return httpx.Response(self.status, content=json.dumps(self.json_body).encode())
        return httpx.Response(self.status, content=self.content or b"")

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def make_client(handler: RecordingHandler, api_key: str = "test-key", **kwargs: Any) -> RebrickableClient:
    """Build a client whose transport is served by handler."""
    return RebrickableClient(
        key_provider=StaticKeyProvider(api_key),
        transport_factory=HttpxTransportFactory(transport=httpx.MockTransport(handler), **kwargs),
    )


SAMPLE_SET = {
    "set_num": "8880-1",
    "name": "Super Car",
    "year": 1994,
    "theme_id": 1,
    "num_parts": 1343,
    "set_img_url": "https://cdn.rebrickable.com/media/sets/8880-1.jpg",
    "set_url": "https://rebrickable.com/sets/8880-1/super-car/",
    "last_modified_dt": "2021-01-01T00:00:00Z",
}

SAMPLE_PART = {
    "part_num": "3001",
    "name": "Brick 2 x 4",
    "part_cat_id": 11,
    "part_url": "https://rebrickable.com/parts/3001/brick-2-x-4/",
    "part_img_url": "https://cdn.rebrickable.com/media/parts/elements/300121.jpg",
    "external_ids": {"BrickLink": ["3001"], "LEGO": ["3001", "6223"]},
    "print_of": None,
}

SAMPLE_THEME = {"id": 1, "name": "Technic", "parent_id": None}

SAMPLE_COLOR = {"id": 36, "name": "Trans-Red", "rgb": "C91A09", "is_trans": True}


def paged(*results: Any, count: Optional[int] = None, next_url: Optional[str] = None) -> dict:
    return {
        "count": len(results) if count is None else count,
        "next": next_url,
        "previous": None,
        "results": list(results),
    }


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep real BRIXIE_* variables and .env files out of the tests."""
    for name in ("BRIXIE_API_KEY", "BRIXIE_BASE_URL", "BRIXIE_DEBUG", "BRIXIE_LOG_LEVEL", "BRIXIE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

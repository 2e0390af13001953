"""Shared pytest fixtures for K-Pop Stylist tests."""

import base64
import os
import re
from typing import Any, Dict, List, Optional, Union

import httpx
import pytest

os.environ.setdefault("LOG_FILE", "")

from fastapi.testclient import TestClient  # noqa: E402

from kpop_stylist.config import Settings  # noqa: E402
from kpop_stylist.main import create_app  # noqa: E402
from kpop_stylist.routers.consult.dependencies import get_http_client  # noqa: E402

PHOTO_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(64))
PHOTO_DATA_URI = "data:image/png;base64," + base64.b64encode(PHOTO_BYTES).decode()

REPORT_TEXT = "Bold stage looks suit your frame."

REPORT_OK: Dict[str, Any] = {
    "output": [
        {"type": "reasoning", "summary": []},
        {
            "type": "message",
            "role": "assistant",
            "content": [
                {"type": "output_text", "text": REPORT_TEXT, "annotations": []}
            ],
        },
    ]
}

_VARIATION = re.compile(rb"Style variation (\d)")


class FakeOpenAI:
    """Stand-in for the OpenAI endpoints, used as an ``httpx.MockTransport`` handler.

    Image edits succeed by default with ``b64_json`` set to ``img<variation>``.
    Individual variations can be switched to an error status, a transport
    exception, or a custom JSON body.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.report_status = 200
        self.report_json: Optional[Any] = REPORT_OK
        self.report_text = ""
        self.report_error: Optional[Exception] = None
        self.image_failures: Dict[int, Union[int, Exception]] = {}
        self.image_payloads: Dict[int, Any] = {}

    @property
    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]

    @property
    def image_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/images/edits")]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path.endswith("/responses"):
            if self.report_error is not None:
                raise self.report_error
            if self.report_status >= 300 or self.report_json is None:
                return httpx.Response(self.report_status, text=self.report_text)
            return httpx.Response(self.report_status, json=self.report_json)

        if request.url.path.endswith("/images/edits"):
            match = _VARIATION.search(request.content)
            variation = int(match.group(1)) if match else 0
            failure = self.image_failures.get(variation)
            if isinstance(failure, Exception):
                raise failure
            if failure is not None:
                return httpx.Response(failure, text=f"variation {variation} failed")
            payload = self.image_payloads.get(
                variation, {"data": [{"b64_json": f"img{variation}"}]}
            )
            return httpx.Response(200, json=payload)

        return httpx.Response(404, json={"error": "unknown endpoint"})


@pytest.fixture
def settings() -> Settings:
    """Settings with a dummy credential and no static asset directory."""
    return Settings(openai_api_key="test-key", static_dir=None)


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI()


def build_client(settings: Settings, fake_openai: FakeOpenAI) -> TestClient:
    """Create a TestClient whose upstream calls are answered by ``fake_openai``."""
    app = create_app(settings)

    async def _mock_http_client():
        transport = httpx.MockTransport(fake_openai)
        async with httpx.AsyncClient(transport=transport) as client:
            yield client

    app.dependency_overrides[get_http_client] = _mock_http_client
    return TestClient(app)


@pytest.fixture
def test_client(settings: Settings, fake_openai: FakeOpenAI) -> TestClient:
    return build_client(settings, fake_openai)


@pytest.fixture
def consult_payload() -> Dict[str, str]:
    return {"photo": PHOTO_DATA_URI, "height": "172", "weight": "58"}

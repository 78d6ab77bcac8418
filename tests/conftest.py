from __future__ import annotations

import sys
from pathlib import Path
from typing import Mapping

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:  # pragma: no cover - import side-effect
    sys.path.insert(0, str(ROOT / "src"))

from core.dispatcher import ApiRequestDispatcher  # noqa: E402
from core.models import ClientConfig, Credentials  # noqa: E402
from core.ports.transport import TransportResponse  # noqa: E402

API_KEY = "vmPUZE6mv9SD5VNHk4HlWFsOr6aKE2zvsw0MuIgwCIPy6utIco14y7Ju91duEh8A"
API_SECRET = "NhqPtmdSJYdKjVHjA7PZj4Mge3R5YNiP1e3UZjInClVN65XAbvqqM6A7H5fATj0j"
FIXED_MS = 1_700_000_000_000
BASE_URL = "https://api.binance.com"


class SpyTransport:
    """Records every send and replies with a canned response."""

    def __init__(self, status: int = 200, body: str = "{}") -> None:
        self.status = status
        self.body = body
        self.calls: list[dict] = []

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: str | None,
    ) -> TransportResponse:
        self.calls.append(
            {"method": method, "url": url, "headers": dict(headers), "body": body}
        )
        return TransportResponse(status=self.status, body=self.body)

    @property
    def last(self) -> dict:
        return self.calls[-1]


@pytest.fixture
def transport() -> SpyTransport:
    return SpyTransport()


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        base_url=BASE_URL,
        credentials=Credentials(api_key=API_KEY, api_secret=API_SECRET),
    )


@pytest.fixture
def dispatcher(transport: SpyTransport, config: ClientConfig) -> ApiRequestDispatcher:
    return ApiRequestDispatcher(transport, config, clock=lambda: FIXED_MS)

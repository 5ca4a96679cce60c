import hashlib
from typing import Optional

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from tinyurlclient.services.client import TinyUrlSimpleClient


TAKEN_ALIAS = "taken_alias"


def build_fake_tinyurl() -> FastAPI:
    """
    Stand-in for tinyurl.com/api-create.php.
    Answers in plain text like the real thing, including "Error" with 200 OK
    for an alias that is already taken.
    """
    app = FastAPI()
    app.state.received = []

    @app.get("/api-create.php", response_class=PlainTextResponse)
    def api_create(request: Request, url: str, alias: Optional[str] = None):
        request.app.state.received.append(str(request.url))

        if alias is not None:
            if alias == TAKEN_ALIAS:
                return "Error"
            return f"https://tinyurl.com/{alias}"

        code = hashlib.sha256(url.encode("utf-8")).hexdigest()[:8]
        return f"https://tinyurl.com/{code}"

    return app


@pytest.fixture()
def fake_tinyurl() -> FastAPI:
    return build_fake_tinyurl()


@pytest.fixture()
async def http_client(fake_tinyurl: FastAPI):
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=fake_tinyurl)) as c:
        yield c


@pytest.fixture()
async def client(http_client: httpx.AsyncClient):
    c = TinyUrlSimpleClient(http_client)
    yield c
    await c.aclose()


@pytest.fixture()
def unreachable() -> list:
    """Requests that reached the transport. Validation tests expect it to stay empty."""
    return []


@pytest.fixture()
async def offline_client(unreachable: list):
    def handler(request: httpx.Request) -> httpx.Response:
        unreachable.append(request)
        return httpx.Response(500, text="should not have been called")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        yield TinyUrlSimpleClient(http)

from __future__ import annotations
import asyncio
from typing import Any, Optional, Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from tinyurlclient.core.config import Settings, settings as default_settings
from tinyurlclient.core.errors import InvalidArgumentError, TinyUrlServiceError
from tinyurlclient.core.link_rules import (
    ALIAS_MAX_LENGTH,
    ALIAS_MIN_LENGTH,
    is_absolute_http_url,
    is_blank,
    is_valid_alias,
    normalize_alias,
)
from tinyurlclient.schemas.links import ShortenRequest
from tinyurlclient.services.responses import ShortenSuccess, classify_response

# Distinguishes "no transport given" from an explicit None
_UNSET: Any = object()


@runtime_checkable
class ShortUrlCreator(Protocol):
    """Creation contract shared by the simple client and any richer, authenticated one."""

    async def create_short_url(
        self,
        url: str,
        alias: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> str: ...


class TinyUrlSimpleClient:
    """
    Unauthenticated client for https://tinyurl.com/api-create.php.

    With no argument the client builds its own httpx.AsyncClient and closes it
    in aclose(). A caller-supplied AsyncClient is only borrowed and is left open.
    The client holds no per-call state, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = _UNSET,
        *,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings

        if http_client is _UNSET:
            self._http_client = httpx.AsyncClient(timeout=self.settings.timeout_seconds, follow_redirects=True)
            self._owns_http_client = True
        elif http_client is None:
            raise InvalidArgumentError("http_client", "missing", "http_client must not be None")
        else:
            self._http_client = http_client
            self._owns_http_client = False

        self._closed = False

    @property
    def owns_http_client(self) -> bool:
        return self._owns_http_client

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> "TinyUrlSimpleClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the transport if this client created it. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        if self._owns_http_client:
            await self._http_client.aclose()

    async def create_short_url(
        self,
        url: str,
        alias: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> str:
        """
        Shorten `url`, optionally under a custom `alias`.

        Raises:
          InvalidArgumentError: bad url/alias; nothing is sent.
          TinyUrlServiceError: HTTP failure, timeout, or an error answer from the service.
          asyncio.CancelledError: the task was cancelled or `cancel_event` was set.
          RuntimeError: the client was already closed.
        """
        url, alias = self._validate(url, alias)

        if self._closed:
            raise RuntimeError("TinyURL client is closed")

        request_url = self.build_request_url(url, alias)

        try:
            response = await self._get(request_url, cancel_event)
        except httpx.TimeoutException as exc:
            raise TinyUrlServiceError("Request to TinyURL API timed out") from exc
        except httpx.RequestError as exc:
            raise TinyUrlServiceError(f"Failed to communicate with TinyURL API: {exc}") from exc

        outcome = classify_response(response.status_code, response.text, self.settings.short_url_prefix)
        if isinstance(outcome, ShortenSuccess):
            return outcome.short_url

        raise TinyUrlServiceError(outcome.reason, status_code=outcome.status_code, body=outcome.body)

    async def create_short_url_from_request(
        self,
        request: ShortenRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> str:
        if request is None:
            raise InvalidArgumentError("request", "missing", "request must not be None")
        return await self.create_short_url(request.url, request.alias, cancel_event)

    def build_request_url(self, url: str, alias: Optional[str] = None) -> str:
        # quote(safe="") escapes everything but unreserved chars, "/" and ":" included
        request_url = f"{self.settings.api_create_url}?url={quote(url, safe='')}"
        if alias is not None:
            request_url += f"&alias={quote(alias, safe='')}"
        return request_url

    @staticmethod
    def _validate(url: Optional[str], alias: Optional[str]) -> tuple[str, Optional[str]]:
        if is_blank(url):
            raise InvalidArgumentError("url", "missing", "url must not be empty")

        if not is_absolute_http_url(url):
            raise InvalidArgumentError(
                "url",
                "malformed",
                "Invalid URL format. URL must be a valid HTTP or HTTPS URL.",
            )

        alias = normalize_alias(alias)
        if alias is not None and not is_valid_alias(alias):
            raise InvalidArgumentError(
                "alias",
                "format",
                "Alias must contain only alphanumeric characters, hyphens, and underscores, "
                f"and be between {ALIAS_MIN_LENGTH}-{ALIAS_MAX_LENGTH} characters long.",
            )

        return url.strip(), alias

    async def _get(self, request_url: str, cancel_event: Optional[asyncio.Event]) -> httpx.Response:
        if cancel_event is None:
            return await self._http_client.get(request_url)

        if cancel_event.is_set():
            raise asyncio.CancelledError("Shortening cancelled by caller")

        request_task = asyncio.ensure_future(self._http_client.get(request_url))
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()

        # a response that arrived together with the cancel signal still wins
        if request_task in done:
            return request_task.result()

        await asyncio.wait({request_task})
        raise asyncio.CancelledError("Shortening cancelled by caller")

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class ShortenSuccess:
    short_url: str


@dataclass(frozen=True)
class ShortenFailure:
    reason: str
    status_code: Optional[int] = None
    body: Optional[str] = None


ShortenOutcome = Union[ShortenSuccess, ShortenFailure]


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code <= 299


def classify_response(status_code: int, body: str, short_url_prefix: str) -> ShortenOutcome:
    """
    The API answers in plain text with no error envelope, so a 2xx status
    does not mean the link was created.

    - non-2xx => failure with status and raw body
    - trimmed body empty => failure
    - body starts with "Error" (any case), contains "Invalid",
      or does not start with the short-link prefix => failure
    - otherwise the trimmed body is the short URL

    A generated link that happens to contain "Invalid" is reported as a
    failure; the service gives us nothing better to go on.
    """
    if not is_success_status(status_code):
        return ShortenFailure(
            reason=f"TinyURL API returned error: {status_code} - {body}",
            status_code=status_code,
            body=body,
        )

    short_url = body.strip()
    if not short_url:
        return ShortenFailure(reason="TinyURL API returned an empty response", status_code=status_code, body=body)

    if (
        short_url.lower().startswith("error")
        or "Invalid" in short_url
        or not short_url.startswith(short_url_prefix)
    ):
        return ShortenFailure(
            reason=f"TinyURL API returned an error: {short_url}",
            status_code=status_code,
            body=body,
        )

    return ShortenSuccess(short_url=short_url)

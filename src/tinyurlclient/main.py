"""
Command-line front end: shorten one URL and print the result.

    tinyurl-shorten https://www.example.com --alias my-alias
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

from tinyurlclient.core.config import Settings
from tinyurlclient.core.errors import InvalidArgumentError, TinyUrlServiceError, describe_error
from tinyurlclient.core.logging import setup_logging
from tinyurlclient.services.client import TinyUrlSimpleClient

logger = logging.getLogger(__name__)

ALIAS_HINT = "Alias must be 5-30 characters long and contain only letters, numbers, hyphens, and underscores."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinyurl-shorten", description="Shorten a URL with TinyURL.")
    parser.add_argument("url")
    parser.add_argument("--alias", default=None, help="custom alias, 5-30 characters")
    parser.add_argument("--timeout", type=float, default=None, help="request timeout in seconds")
    parser.add_argument("--json", action="store_true", dest="as_json", help="print JSON instead of plain text")
    parser.add_argument("--verbose", action="store_true")
    return parser


def print_error(exc: BaseException, as_json: bool) -> None:
    error = describe_error(exc)
    if as_json:
        print(json.dumps({"success": False, "error": {"code": error.code, "message": error.message}}, indent=2), file=sys.stderr)
    else:
        print(f"Error: {error.message}", file=sys.stderr)
        if isinstance(exc, InvalidArgumentError) and exc.param_name == "alias":
            print(ALIAS_HINT, file=sys.stderr)


async def shorten(url: str, alias: Optional[str], settings: Settings, as_json: bool) -> int:
    async with TinyUrlSimpleClient(settings=settings) as client:
        logger.debug("Shortening %s (alias=%s)", url, alias)
        try:
            short_url = await client.create_short_url(url, alias)
        except (InvalidArgumentError, TinyUrlServiceError) as exc:
            logger.debug("Shortening failed: %r", exc)
            print_error(exc, as_json)
            return 1

    logger.info("Shortened %s to %s", url, short_url)
    if as_json:
        print(json.dumps({"success": True, "short_url": short_url, "original_url": url}, indent=2))
    else:
        print(short_url)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else "WARNING")

    settings = Settings() if args.timeout is None else Settings(timeout_seconds=args.timeout)

    try:
        return asyncio.run(shorten(args.url, args.alias, settings, args.as_json))
    except (KeyboardInterrupt, asyncio.CancelledError):
        print_error(asyncio.CancelledError(), args.as_json)
        return 130


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations
import re
from typing import Optional

from pydantic import HttpUrl, TypeAdapter, ValidationError

ALIAS_MIN_LENGTH = 5
ALIAS_MAX_LENGTH = 30

_ALIAS_RE = re.compile(r"[A-Za-z0-9_-]+")
_HTTP_URL = TypeAdapter(HttpUrl)


def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def is_absolute_http_url(url: str) -> bool:
    # callers keep sending their own string; HttpUrl normalizes (trailing slash)
    try:
        _HTTP_URL.validate_python(url.strip())
    except ValidationError:
        return False
    return True


def is_valid_alias(alias: str) -> bool:
    # ASCII only; str.isalnum() would let unicode letters through
    if not ALIAS_MIN_LENGTH <= len(alias) <= ALIAS_MAX_LENGTH:
        return False
    return _ALIAS_RE.fullmatch(alias) is not None


def normalize_alias(alias: Optional[str]) -> Optional[str]:
    # blank alias means "no alias", never a validation error
    if is_blank(alias):
        return None
    return alias

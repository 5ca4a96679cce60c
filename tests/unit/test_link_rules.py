import pytest

from tinyurlclient.core.link_rules import (
    is_absolute_http_url,
    is_blank,
    is_valid_alias,
    normalize_alias,
)


def test_is_blank_true_for_none_empty_and_whitespace():
    assert is_blank(None) is True
    assert is_blank("") is True
    assert is_blank(" \t\n") is True


def test_is_blank_false_for_text():
    assert is_blank("x") is False


@pytest.mark.parametrize(
    "url",
    ["http://example.com", "https://www.example.com/path?q=1", "HTTPS://EXAMPLE.COM", " https://example.com "],
)
def test_is_absolute_http_url_accepts(url: str):
    assert is_absolute_http_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "not-a-url",
        "example.com",
        "ftp://example.com",
        "file://C:/test.txt",
        "javascript:alert(1)",
        "http://",
        "//example.com",
        "https://exa mple.com",
        "http://:80",
        "https://ex<am>ple.com",
    ],
)
def test_is_absolute_http_url_rejects(url: str):
    assert is_absolute_http_url(url) is False


def test_alias_length_boundaries():
    assert is_valid_alias("a" * 4) is False
    assert is_valid_alias("a" * 5) is True
    assert is_valid_alias("a" * 30) is True
    assert is_valid_alias("a" * 31) is False


@pytest.mark.parametrize("alias", ["my-alias", "my_alias", "MyAlias01", "-----", "12345"])
def test_alias_allowed_characters(alias: str):
    assert is_valid_alias(alias) is True


@pytest.mark.parametrize("alias", ["invalid@alias", "invalid alias", "invalid.alias", "caf\u00e9s", "alias\n"])
def test_alias_rejected_characters(alias: str):
    assert is_valid_alias(alias) is False


def test_normalize_alias_blank_becomes_none():
    assert normalize_alias(None) is None
    assert normalize_alias("") is None
    assert normalize_alias("   ") is None


def test_normalize_alias_keeps_value_untouched():
    assert normalize_alias("my_alias") == "my_alias"
    assert normalize_alias(" padded ") == " padded "

"""Tests for the exception hierarchy."""

from __future__ import annotations

import logging

import pytest

from imgix_url import (
    EncoderNotFoundError,
    ImageTarget,
    ImgixUrlError,
    OptionFamily,
    UrlParseError,
    parse_url,
)


def test_hierarchy():
    assert issubclass(UrlParseError, ImgixUrlError)
    assert issubclass(EncoderNotFoundError, ImgixUrlError)


def test_base_to_dict():
    assert ImgixUrlError("boom").to_dict() == {
        "error": "ImgixUrlError",
        "message": "boom",
    }


def test_parse_error_to_dict():
    with pytest.raises(UrlParseError) as exc_info:
        parse_url("ftp://files.test/a.png")
    payload = exc_info.value.to_dict()
    assert payload["error"] == "URL_PARSE_ERROR"
    assert payload["text"] == "ftp://files.test/a.png"
    assert "ftp" in payload["reason"]


def test_encoder_not_found_to_dict():
    err = EncoderNotFoundError(OptionFamily.ROTATION)
    assert err.to_dict() == {"error": "ENCODER_NOT_FOUND", "family": "rotation"}
    assert "rotation" in str(err)


def test_from_string_logs_rejection(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="imgix_url.target"):
        assert ImageTarget.from_string("not a url") is None
    assert "Rejected image URL" in caplog.text

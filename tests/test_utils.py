"""Tests for loading model documents from files and URLs."""

import logging

import pytest
import requests

from dbdesigner_dbic import utils
from dbdesigner_dbic.reader import ReaderError


class FakeResponse:
    def __init__(self, content=b"<DBMODEL/>", status_code=200, headers=None):
        self.content = content
        self.status_code = status_code
        self.headers = headers or {"content-type": "application/xml"}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)


def test_load_from_file(model_file):
    source, data = utils.load_model(file_path=model_file)

    assert source == str(model_file)
    assert data.startswith(b"<?xml")


def test_missing_file(tmp_path):
    with pytest.raises(ReaderError, match="File not found"):
        utils.load_model(file_path=tmp_path / "missing.xml")


def test_neither_source_given():
    with pytest.raises(ReaderError, match="no input file defined"):
        utils.load_model()


def test_both_sources_given(model_file):
    with pytest.raises(ReaderError, match="both"):
        utils.load_model(file_path=model_file, url="https://example.com/model.xml")


def test_load_from_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse()

    monkeypatch.setattr(utils.requests, "get", fake_get)

    source, data = utils.load_model(url="https://example.com/model.xml", timeout=5)

    assert source == "https://example.com/model.xml"
    assert data == b"<DBMODEL/>"
    assert calls == [("https://example.com/model.xml", 5)]


def test_invalid_url():
    with pytest.raises(ReaderError, match="Invalid URL"):
        utils.load_model(url="not-a-url")


def test_http_error(monkeypatch):
    monkeypatch.setattr(utils.requests, "get", lambda url, timeout: FakeResponse(status_code=404))

    with pytest.raises(ReaderError, match="HTTP error 404"):
        utils.load_model(url="https://example.com/model.xml")


def test_connection_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(utils.requests, "get", fake_get)

    with pytest.raises(ReaderError, match="Connection error"):
        utils.load_model(url="https://example.com/model.xml")


def test_non_xml_suffix_is_logged(tmp_path, model_xml, caplog, monkeypatch):
    path = tmp_path / "model.txt"
    path.write_text(model_xml, encoding="utf-8")
    # The CLI may have detached the package logger from the root handlers
    monkeypatch.setattr(logging.getLogger("dbdesigner_dbic"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="dbdesigner_dbic"):
        utils.load_model(file_path=path)

    assert f"File does not have .xml extension: {path}" in caplog.text


def test_http_error_is_logged(monkeypatch, caplog):
    monkeypatch.setattr(utils.requests, "get", lambda url, timeout: FakeResponse(status_code=500))
    monkeypatch.setattr(logging.getLogger("dbdesigner_dbic"), "propagate", True)

    with caplog.at_level(logging.ERROR, logger="dbdesigner_dbic"), pytest.raises(ReaderError):
        utils.load_model(url="https://example.com/model.xml")

    assert "HTTP error 500 for URL: https://example.com/model.xml" in caplog.text

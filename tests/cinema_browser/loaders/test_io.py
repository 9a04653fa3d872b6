import logging

import requests

from cinema_browser.loaders import io as loaders_io
from cinema_browser.loaders.io import fetch_text, is_remote


class _Response:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text


def test_is_remote():
    assert is_remote("http://host/a.csv")
    assert is_remote("https://host/a.csv")
    assert not is_remote("data/a.csv")


def test_fetch_local_file(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("hello")

    assert fetch_text(str(path)) == "hello"


def test_fetch_missing_local_file(tmp_path):
    assert fetch_text(str(tmp_path / "missing.txt")) == ""


def test_fetch_undecodable_local_file(tmp_path, caplog):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"a,b\n\xff\xfe,1\n")

    with caplog.at_level(logging.ERROR):
        assert fetch_text(str(path)) == ""

    assert "Error retrieving" in caplog.text


def test_fetch_remote_ok(monkeypatch):
    monkeypatch.setattr(loaders_io.requests, "get", lambda url, timeout: _Response(200, "a,b\n"))

    assert fetch_text("http://host/a.csv") == "a,b\n"


def test_fetch_remote_http_error(monkeypatch):
    monkeypatch.setattr(loaders_io.requests, "get", lambda url, timeout: _Response(404, "nope"))

    assert fetch_text("http://host/a.csv") == ""


def test_fetch_remote_connection_error(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(loaders_io.requests, "get", boom)

    assert fetch_text("https://host/a.csv") == ""

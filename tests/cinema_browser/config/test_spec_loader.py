import json

import pytest

from cinema_browser.config.loader import load_spec, resolve_directory
from cinema_browser.config.model import SpecDocument
from cinema_browser.config.settings import AppSettings
from cinema_browser.core.exceptions import SpecError


@pytest.mark.parametrize(
    "url, expected",
    [
        ("db/cinema.json", "db/"),
        ("http://host/a/b/cinema.json", "http://host/a/b/"),
        ("C:\\data\\cinema.json", "C:\\data/"),
        ("cinema.json", ""),
    ],
)
def test_resolve_directory(url, expected):
    assert resolve_directory(url) == expected


def test_load_spec_reads_json(tmp_path):
    path = tmp_path / "cinema.json"
    path.write_text(json.dumps({"cinema": {"name": "x"}, "sources": {}, "displays": {}}))

    spec = load_spec(str(path))

    assert isinstance(spec, SpecDocument)
    assert spec.cinema == {"name": "x"}
    assert spec.sources == {}


def test_load_spec_rejects_invalid_json(tmp_path):
    path = tmp_path / "cinema.json"
    path.write_text("{not json")

    with pytest.raises(SpecError, match="Invalid JSON"):
        load_spec(str(path))


def test_load_spec_rejects_non_object(tmp_path):
    path = tmp_path / "cinema.json"
    path.write_text("[1, 2]")

    with pytest.raises(SpecError, match="must be a JSON object"):
        load_spec(str(path))


def test_spec_document_tolerates_bad_sections():
    spec = SpecDocument.from_raw({"sources": [1, 2], "displays": None})

    assert spec.sources == {}
    assert spec.displays == {}
    assert spec.cinema == {}
    assert SpecDocument.from_raw("nonsense").raw == {}


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("CINEMA_SPEC", "elsewhere/cinema.json")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("DEBUG", "1")

    settings = AppSettings.from_env()

    assert settings == AppSettings(spec_url="elsewhere/cinema.json", port=9000, debug=True)


def test_settings_defaults(monkeypatch):
    for name in ("CINEMA_SPEC", "PORT", "DEBUG"):
        monkeypatch.delenv(name, raising=False)

    assert AppSettings.from_env() == AppSettings()

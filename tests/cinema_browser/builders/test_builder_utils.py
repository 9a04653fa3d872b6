import logging

from cinema_browser.builders.utils import (
    ASSET_ROUTE,
    UriParser,
    asset_url,
    unique_numeric_values,
    unique_ordinal_values,
)


class _Db:
    def __init__(self, directory):
        self.directory = directory


def test_unique_numeric_values_sorted_without_nan(caplog):
    with caplog.at_level(logging.INFO):
        values = unique_numeric_values([3, "1", 2, 3, None, float("nan"), "abc", 10])

    assert values == ["1", 2, 3, 10]
    assert "will be ignored" in caplog.text


def test_unique_ordinal_values_keeps_first_seen_order():
    assert unique_ordinal_values(["b", "a", "b", 1, "a"]) == ["b", "a", 1]


def test_uri_parser_substitutes_in_order():
    parser = UriParser({"uri_format": "images/%s/t_%f.png", "0": "field", "1": "time"})

    assert parser.parse({"field": "pressure", "time": 0.5}) == "images/pressure/t_0.5.png"


def test_uri_parser_leading_control_and_escape():
    parser = UriParser({"uri_format": "%s_\\%d_%d", "0": "a", "1": "b"})

    assert parser.keys == ["a", "b"]
    assert parser.parse({"a": "x", "b": 7}) == "x_\\%d_7"


def test_uri_parser_missing_argument_logged(caplog):
    with caplog.at_level(logging.ERROR):
        parser = UriParser({"uri_format": "%s.png"})

    assert parser.keys == [None]
    assert "Missing argument 0" in caplog.text
    assert parser.parse({"anything": 1}) == ""


def test_asset_url_local_and_remote():
    assert asset_url(_Db("db/"), "images/a.png") == f"{ASSET_ROUTE}/images/a.png"
    assert asset_url(_Db("http://host/db/"), "images/a.png") == "http://host/db/images/a.png"
    assert asset_url(None, "/a.png") == f"{ASSET_ROUTE}/a.png"

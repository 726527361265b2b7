import pytest

from ssmgr_collector.core.plugin_options import parse_plugin_options


def test_parses_entries():
    assert parse_plugin_options("a=1;b=2") == {"a": "1", "b": "2"}


@pytest.mark.parametrize("raw", ["", ";", ";;;", " ; "])
def test_empty_input_yields_empty_map(raw):
    assert parse_plugin_options(raw) == {}


def test_ignores_empty_entries():
    assert parse_plugin_options("a=1;;b=2;") == {"a": "1", "b": "2"}


def test_skips_entry_without_separator(log_records):
    assert parse_plugin_options("novalue") == {}
    warnings = [r for r in log_records if r["level"].name == "WARNING"]
    assert len(warnings) == 1
    assert "novalue" in warnings[0]["message"]


def test_skips_malformed_entry_but_keeps_others(log_records):
    assert parse_plugin_options("a=1;broken;b=2") == {"a": "1", "b": "2"}
    assert any("broken" in r["message"] for r in log_records)


def test_skips_empty_key(log_records):
    assert parse_plugin_options("=1;a=2") == {"a": "2"}
    assert any(r["level"].name == "WARNING" for r in log_records)


def test_splits_on_first_equals_sign():
    assert parse_plugin_options("url=http://h/?x=1") == {"url": "http://h/?x=1"}


def test_keeps_empty_value():
    assert parse_plugin_options("flag=") == {"flag": ""}


def test_last_duplicate_wins():
    assert parse_plugin_options("a=1;b=2;a=3") == {"a": "3", "b": "2"}


def test_strips_surrounding_whitespace():
    assert parse_plugin_options(" a = 1 ; b=two words ") == {"a": "1", "b": "two words"}


def test_escaped_separators_are_literal():
    raw = r"path=C:\\dir;sep=\;;eq\=key=v\=1"
    assert parse_plugin_options(raw) == {"path": "C:\\dir", "sep": ";", "eq=key": "v=1"}


def test_trailing_backslash_is_kept():
    assert parse_plugin_options("a=x\\") == {"a": "x\\"}


def test_escaped_whitespace_is_kept():
    assert parse_plugin_options(r"a=\ x\ ;\ k=v") == {"a": " x ", " k": "v"}


def test_escaped_whitespace_only_value():
    assert parse_plugin_options(r"pad=  \   ") == {"pad": " "}

from __future__ import annotations

from restalign.headers import parse_headers


def test_parses_pairs_in_order() -> None:
    headers = parse_headers("a:1,b:2")
    assert headers == {"a": "1", "b": "2"}
    assert list(headers) == ["a", "b"]


def test_empty_and_blank_input_give_empty_mapping() -> None:
    assert parse_headers("") == {}
    assert parse_headers("   ") == {}
    assert parse_headers(None) == {}


def test_repeated_key_keeps_first_position_and_last_value() -> None:
    headers = parse_headers("a:1,b:2,a:3")
    assert headers == {"a": "3", "b": "2"}
    assert list(headers) == ["a", "b"]


def test_entry_without_colon_has_empty_value() -> None:
    assert parse_headers("novalue") == {"novalue": ""}


def test_splits_on_first_colon_only() -> None:
    assert parse_headers("Authorization:Basic a:b") == {"Authorization": "Basic a:b"}


def test_empty_keys_are_dropped() -> None:
    assert parse_headers(":orphan, :x,,good:1") == {"good": "1"}


def test_comma_in_value_splits_entry() -> None:
    assert parse_headers("Accept:text/html,application/json") == {
        "Accept": "text/html",
        "application/json": "",
    }


def test_keys_and_values_keep_surrounding_whitespace() -> None:
    assert parse_headers("a: 1 , b :2") == {"a": " 1 ", " b ": "2"}

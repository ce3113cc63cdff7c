from __future__ import annotations

from pathlib import Path

import pytest

from restalign.errors import ConfigurationError
from restalign.properties import load_properties, merge_properties, parse_assignment, properties_by_prefix


def test_properties_by_prefix_strips_prefix_and_keeps_order() -> None:
    props = {
        "restDependencyRanks": "global",
        "restDependencyRanks.": "nameless",
        "restDependencyRanks.org.foo": "1",
        "other": "x",
        "restDependencyRanks.bar": "2",
    }
    assert list(properties_by_prefix(props, "restDependencyRanks.").items()) == [("org.foo", "1"), ("bar", "2")]


def test_load_properties_flattens_tables(property_file: Path) -> None:
    props = load_properties(property_file)
    assert props == {
        "restURL": "http://da.example.com/da/rest/v-1",
        "restBrewPullActive": "true",
        "restMaxSize": "50",
        "restDependencyRanks.org.foo": "redhat;community",
        "restDependencyDenyList.org.foo": "org.foo:legacy",
    }


def test_load_properties_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_properties(tmp_path / "absent.toml")


def test_load_properties_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("restURL = \n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_properties(path)


def test_load_properties_rejects_lists(tmp_path: Path) -> None:
    path = tmp_path / "list.toml"
    path.write_text('restHeaders = ["a", "b"]\n', encoding="utf-8")
    with pytest.raises(ConfigurationError) as excinfo:
        load_properties(path)
    assert excinfo.value.property_name == "restHeaders"


def test_parse_assignment() -> None:
    assert parse_assignment("restURL=http://x/a=b") == ("restURL", "http://x/a=b")
    assert parse_assignment("restDependencyDenyList.foo=") == ("restDependencyDenyList.foo", "")
    assert parse_assignment("restSuffixAlign") == ("restSuffixAlign", "true")
    with pytest.raises(ConfigurationError):
        parse_assignment("=value")


def test_merge_properties_later_sources_win() -> None:
    merged = merge_properties({"a": "1", "b": "2"}, [("b", "3"), ("c", "4")])
    assert merged == {"a": "1", "b": "3", "c": "4"}

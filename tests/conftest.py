"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def full_properties() -> dict[str, str]:
    """A property map touching every recognized key."""
    return {
        "restURL": "http://da.example.com/da/rest/v-1",
        "restSuffixAlign": "false",
        "restBrewPullActive": "TRUE",
        "restMode": "PERSISTENT",
        "restMaxSize": "200",
        "restMinSize": "10",
        "restHeaders": "X-Trace:abc,Authorization:Basic dXNlcjpwYXNz",
        "restConnectionTimeout": "5",
        "restSocketTimeout": "60",
        "restRetryDuration": "15",
        "restDependencyRanks": "redhat|community",
        "restDependencyAllowList": "org.jboss:*",
        "restDependencyDenyList": "org.bad:*",
        "restDependencyRanks.org.foo": "a|b|c",
        "restDependencyAllowList.org.foo": "org.foo:*",
        "restDependencyDenyList.org.bar": "",
        "restDependencyRankDelimiter": "|",
    }


@pytest.fixture
def property_file(tmp_path: Path) -> Path:
    """A TOML property file with nested scoped tables."""
    return _write(
        tmp_path / "build.toml",
        """
restURL = "http://da.example.com/da/rest/v-1"
restBrewPullActive = true
restMaxSize = 50

[restDependencyRanks]
"org.foo" = "redhat;community"

[restDependencyDenyList]
"org.foo" = "org.foo:legacy"
""",
    )

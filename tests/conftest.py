"""Pytest fixtures for listview tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from listview import ListViewColumn
from listview.config import ALERT_CONTEXT_ENV_VAR, EMPTY_MESSAGE_ENV_VAR, PLACEHOLDER_ENV_VAR


@pytest.fixture(autouse=True)
def clean_listview_env(monkeypatch):
    """Keep LISTVIEW_* variables from the host environment out of tests."""
    for env_var in (PLACEHOLDER_ENV_VAR, EMPTY_MESSAGE_ENV_VAR, ALERT_CONTEXT_ENV_VAR):
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def people() -> list[dict[str, Any]]:
    """Sample records."""
    return [
        {"name": "Alice", "email": "alice@example.com"},
        {"name": "Bob", "email": ""},
    ]


@pytest.fixture
def people_columns() -> dict[str, Any]:
    """Column definitions matching the ``people`` records."""
    return {
        "name": (ListViewColumn, {"title": "Name"}),
        "email": (ListViewColumn, {"title": "E-mail", "class": "is-email"}),
    }


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a manifest to a temporary YAML file and return its path."""

    def _write(data: dict[str, Any], name: str = "listview.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write

"""Shared pytest fixtures and test helpers for fieldrules tests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

PERSON_SCHEMA = """\
[fields.name]
rules = [
    { rule = "type", expected_type = "str" },
    { rule = "length", minimum = 2, maximum = 5 },
]

[fields.age]
rules = [{ rule = "range", minimum = 0, maximum = 130 }]

[[fields.zip.rules]]
rule = "numeric_string"
target_type = "uint32"
error_message = "Zip must be numeric."

[fields.score]
rules = [{ rule = "range", min_field = "score_min", max_field = "score_max" }]
"""


@dataclass
class Reading:
    """Model whose bounds live on sibling attributes."""

    value: float
    low: float
    high: float
    label: str = "probe"
    min_len: int = 1
    max_len: int = 8

    @property
    def span(self) -> float:
        return self.high - self.low

    def describe(self) -> str:
        return f"{self.label}={self.value}"


def valid_person(**overrides: Any) -> dict[str, Any]:
    """A record that satisfies PERSON_SCHEMA, with optional field overrides."""
    record: dict[str, Any] = {
        "name": "Ada",
        "age": 36,
        "zip": "02139",
        "score": 7.5,
        "score_min": 0.0,
        "score_max": 10.0,
    }
    record.update(overrides)
    return record


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's FIELDRULES_* environment out of the tests."""
    monkeypatch.delenv("FIELDRULES_CONFIG", raising=False)
    monkeypatch.delenv("FIELDRULES_MESSAGES__OVERRIDES", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no config file is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def reading() -> Reading:
    return Reading(value=5.0, low=0.0, high=10.0)


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    path = tmp_path / "person.schema.toml"
    path.write_text(PERSON_SCHEMA, encoding="utf-8")
    return path


def write_record(directory: Path, record: dict[str, Any], name: str = "person.json") -> Path:
    path = directory / name
    path.write_text(json.dumps(record), encoding="utf-8")
    return path

from __future__ import annotations

import json
from pathlib import Path

import pytest

from format_bench.adapters.json import JsonAdapter
from format_bench.domain import generate_dataset
from format_bench.errors import ParseError

EXPECTED_KEYS = {
    "name",
    "age",
    "email",
    "score1",
    "score2",
    "score3",
    "score4",
    "score5",
    "balance",
    "expenditure",
}


def _document(**overrides: str) -> str:
    """One-element array with every field present; values are raw JSON text."""
    fields = {
        "name": '"Person_0"',
        "age": "5",
        "email": '""',
        "score1": "0",
        "score2": "0",
        "score3": "0",
        "score4": "0",
        "score5": "0",
        "balance": "0",
        "expenditure": "1.5",
    }
    fields.update(overrides)
    body = ", ".join(f'"{key}": {value}' for key, value in fields.items())
    return f"[{{{body}}}]"


def test_empty_dataset_is_empty_array(tmp_path: Path) -> None:
    path = tmp_path / "people.json"
    JsonAdapter().write([], path)

    assert path.read_bytes() == b"[]"


def test_dataset_is_single_array_with_lowercase_keys(tmp_path: Path) -> None:
    path = tmp_path / "people.json"
    JsonAdapter().write(generate_dataset(3), path)

    payload = json.loads(path.read_text(encoding="utf-8"))

    assert isinstance(payload, list)
    assert len(payload) == 3
    assert all(set(item) == EXPECTED_KEYS for item in payload)
    assert payload[2]["name"] == "Person_2"
    assert payload[2]["balance"] == 3.0


@pytest.mark.parametrize(
    "content",
    [
        "",
        "[{",
        '{"name": "Person_0"}',
        '[{"name": "Person_0"}]',
        _document(age='"old"'),
        "[1, 2, 3]",
        _document(age='"5"'),
        _document(age="true"),
        _document(age="5.0"),
        _document(name="7"),
    ],
)
def test_malformed_document_is_parse_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "people.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ParseError):
        JsonAdapter().read(path)


def test_integer_balance_is_accepted_as_float(tmp_path: Path) -> None:
    path = tmp_path / "people.json"
    path.write_text(_document(), encoding="utf-8")

    records, _ = JsonAdapter().read(path)

    assert records[0].age == 5
    assert records[0].balance == 0.0
    assert isinstance(records[0].balance, float)


def test_missing_email_key_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "people.json"
    payload = json.loads(_document())
    del payload[0]["email"]
    path.write_text(json.dumps(payload), encoding="utf-8")

    records, _ = JsonAdapter().read(path)

    assert records[0].email == ""

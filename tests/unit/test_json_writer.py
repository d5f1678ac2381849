"""Unit tests for the pretty JSON writer."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from stemindex import json_writer
from stemindex.inverted_index import InvertedIndex
from stemindex.query_result import MatchResult


pytestmark = pytest.mark.unit


class _Exploding:
    def __str__(self) -> str:
        raise OSError("disk full")


def test_empty_containers() -> None:
    assert json_writer.array_to_string([]) == "[\n]"
    assert json_writer.object_to_string({}) == "{\n}"
    assert json_writer.nested_array_to_string({}) == "{\n}"
    assert json_writer.nested_object_to_string({}) == "{\n}"
    assert json_writer.results_to_string({}) == "{\n}"


def test_array_writes_values_verbatim() -> None:
    assert json_writer.array_to_string(['"a"', '"b"']) == '[\n\t"a",\n\t"b"\n]'
    assert json_writer.array_to_string([1, 2, 3]) == "[\n\t1,\n\t2,\n\t3\n]"


def test_array_at_nested_level() -> None:
    buffer = io.StringIO()

    returned = json_writer.write_array([1, 2], buffer, 2)

    assert returned is buffer
    assert buffer.getvalue() == "[\n\t\t\t1,\n\t\t\t2\n\t\t]"


def test_object_quotes_keys_only() -> None:
    text = json_writer.object_to_string({"a.txt": 3, "b.txt": '"x"'})

    assert text == '{\n\t"a.txt": 3,\n\t"b.txt": "x"\n}'


def test_nested_array() -> None:
    text = json_writer.nested_array_to_string({"a": [1, 2], "b": []})

    assert text == '{\n\t"a": [\n\t\t1,\n\t\t2\n\t],\n\t"b": [\n\t]\n}'


def test_nested_object_renders_index_view() -> None:
    index = InvertedIndex()
    index.add("run", "b.txt", 2)
    index.add("run", "a.txt", 5)
    index.add("run", "a.txt", 1)

    text = json_writer.nested_object_to_string(index.view())

    assert text == (
        "{\n"
        '\t"run": {\n'
        '\t\t"a.txt": [\n'
        "\t\t\t1,\n"
        "\t\t\t5\n"
        "\t\t],\n"
        '\t\t"b.txt": [\n'
        "\t\t\t2\n"
        "\t\t]\n"
        "\t}\n"
        "}"
    )


def test_single_result() -> None:
    buffer = io.StringIO()

    json_writer.write_result(MatchResult(3, 1, "a.txt"), buffer, 0)

    assert buffer.getvalue() == (
        '{\n\t"count": 1,\n\t"score": 0.33333333,\n\t"where": "a.txt"\n}'
    )


def test_results_by_query() -> None:
    results = {
        "appl": [MatchResult(4, 2, "a.txt"), MatchResult(10, 1, "b.txt")],
        "zzz": [],
    }

    text = json_writer.results_to_string(results)

    assert text == (
        "{\n"
        '\t"appl": [\n'
        "\t\t{\n"
        '\t\t\t"count": 2,\n'
        '\t\t\t"score": 0.50000000,\n'
        '\t\t\t"where": "a.txt"\n'
        "\t\t},\n"
        "\t\t{\n"
        '\t\t\t"count": 1,\n'
        '\t\t\t"score": 0.10000000,\n'
        '\t\t\t"where": "b.txt"\n'
        "\t\t}\n"
        "\t],\n"
        '\t"zzz": [\n'
        "\t]\n"
        "}"
    )


def test_to_file_writes_utf8_without_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "counts.json"

    json_writer.object_to_file({"café.txt": 2}, path)

    assert path.read_bytes() == '{\n\t"café.txt": 2\n}'.encode("utf-8")


def test_every_file_form_matches_string_form(tmp_path: Path) -> None:
    cases = [
        (json_writer.array_to_file, json_writer.array_to_string, [1, 2]),
        (json_writer.object_to_file, json_writer.object_to_string, {"a": 1}),
        (json_writer.nested_array_to_file, json_writer.nested_array_to_string, {"a": [1]}),
        (
            json_writer.nested_object_to_file,
            json_writer.nested_object_to_string,
            {"t": {"a": [1]}},
        ),
        (
            json_writer.results_to_file,
            json_writer.results_to_string,
            {"q": [MatchResult(2, 1, "a")]},
        ),
    ]
    for i, (to_file, to_string, elements) in enumerate(cases):
        path = tmp_path / f"out{i}.json"
        to_file(elements, path)
        assert path.read_text(encoding="utf-8") == to_string(elements)


def test_to_string_returns_none_on_write_failure() -> None:
    assert json_writer.array_to_string([1, _Exploding()]) is None
    assert json_writer.object_to_string({"a": _Exploding()}) is None


def test_to_file_propagates_and_keeps_partial_output(tmp_path: Path) -> None:
    path = tmp_path / "partial.json"

    with pytest.raises(OSError):
        json_writer.array_to_file([1, _Exploding()], path)

    assert path.read_text(encoding="utf-8") == "[\n\t1,\n\t"


def test_to_file_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        json_writer.array_to_file([1], tmp_path / "missing" / "out.json")

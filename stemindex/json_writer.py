"""
Pretty JSON-style writer for index and search output.

Format (byte-exact, relied on for stable output):
  - one tab per nesting level
  - every element starts on a new line at its level; elements are separated
    by a bare comma, no trailing comma
  - the closing bracket sits on its own line one level out; an empty
    container is "[" newline "]" (or "{" newline "}")
  - keys are double-quoted and followed by ": "
  - values are written verbatim with str(); nothing is escaped or quoted,
    so callers pass pre-quoted strings when a JSON string is wanted
  - no trailing newline

Every shape comes in three forms:
  write_<shape>(elements, writer, level)  -> writer
  <shape>_to_file(elements, path)         -> None, OSError propagates
  <shape>_to_string(elements)             -> str, or None on failure

Order is whatever the given collections iterate in; nothing here sorts.
Not thread-safe for a shared writer.
"""

import io
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, TextIO

from .query_result import MatchResult

logger = logging.getLogger(__name__)

Writer = TextIO


def write_line(writer: Writer, level: int) -> None:
    """Start a new line indented to level."""
    writer.write("\n")
    writer.write("\t" * level)


def write_quoted(text: str, writer: Writer) -> None:
    writer.write('"')
    writer.write(text)
    writer.write('"')


def write_key(key: str, writer: Writer) -> None:
    write_quoted(str(key), writer)
    writer.write(": ")


def _write_block(
    items: Iterable,
    write_item: Callable[[Any, Writer, int], None],
    writer: Writer,
    level: int,
    brackets: str,
) -> Writer:
    """Write items between brackets, one per line at level + 1."""
    writer.write(brackets[0])
    first = True
    for item in items:
        if not first:
            writer.write(",")
        first = False
        write_line(writer, level + 1)
        write_item(item, writer, level + 1)
    write_line(writer, level)
    writer.write(brackets[1])
    return writer


def write_array(elements: Iterable, writer: Writer, level: int = 0) -> Writer:
    """Array of scalars."""

    def write_item(elem, w, _lvl):
        w.write(str(elem))

    return _write_block(elements, write_item, writer, level, "[]")


def write_object(elements: Mapping[str, Any], writer: Writer, level: int = 0) -> Writer:
    """Object of scalars."""

    def write_item(entry, w, _lvl):
        key, value = entry
        write_key(key, w)
        w.write(str(value))

    return _write_block(elements.items(), write_item, writer, level, "{}")


def write_nested_array(
    elements: Mapping[str, Iterable], writer: Writer, level: int = 0
) -> Writer:
    """Object whose values are arrays of scalars."""

    def write_item(entry, w, lvl):
        key, values = entry
        write_key(key, w)
        write_array(values, w, lvl)

    return _write_block(elements.items(), write_item, writer, level, "{}")


def write_nested_object(
    elements: Mapping[str, Mapping[str, Iterable]], writer: Writer, level: int = 0
) -> Writer:
    """
    Object of objects of arrays; the shape of InvertedIndex.view():

        {
            "term": {
                "location": [
                    1,
                    5
                ]
            }
        }
    """

    def write_item(entry, w, lvl):
        key, inner = entry
        write_key(key, w)
        write_nested_array(inner, w, lvl)

    return _write_block(elements.items(), write_item, writer, level, "{}")


def write_result(result: MatchResult, writer: Writer, level: int = 0) -> Writer:
    """One result as {"count", "score", "where"}, in that order."""
    writer.write("{")
    write_line(writer, level + 1)
    write_key("count", writer)
    writer.write(str(result.match_count))
    writer.write(",")
    write_line(writer, level + 1)
    write_key("score", writer)
    writer.write(result.score_string())
    writer.write(",")
    write_line(writer, level + 1)
    write_key("where", writer)
    write_quoted(result.location, writer)
    write_line(writer, level)
    writer.write("}")
    return writer


def write_result_array(
    results: Iterable[MatchResult], writer: Writer, level: int = 0
) -> Writer:
    """Array of results, in the order given (callers pass them ranked)."""
    return _write_block(results, write_result, writer, level, "[]")


def write_results(
    elements: Mapping[str, Iterable[MatchResult]], writer: Writer, level: int = 0
) -> Writer:
    """Object mapping each query to its ranked results."""

    def write_item(entry, w, lvl):
        query, results = entry
        write_key(query, w)
        write_result_array(results, w, lvl)

    return _write_block(elements.items(), write_item, writer, level, "{}")


def _to_file(write: Callable[[Any, Writer, int], Writer], elements, path) -> None:
    # Handle closes on every path; a failed write leaves the partial file.
    with open(Path(path), "w", encoding="utf-8", newline="\n") as f:
        write(elements, f, 0)


def _to_string(write: Callable[[Any, Writer, int], Writer], elements) -> str | None:
    buffer = io.StringIO()
    try:
        write(elements, buffer, 0)
    except OSError:
        logger.exception("Could not render %s", write.__name__)
        return None
    return buffer.getvalue()


def array_to_file(elements: Iterable, path: Path) -> None:
    _to_file(write_array, elements, path)


def object_to_file(elements: Mapping[str, Any], path: Path) -> None:
    _to_file(write_object, elements, path)


def nested_array_to_file(elements: Mapping[str, Iterable], path: Path) -> None:
    _to_file(write_nested_array, elements, path)


def nested_object_to_file(elements: Mapping[str, Mapping[str, Iterable]], path: Path) -> None:
    _to_file(write_nested_object, elements, path)


def results_to_file(elements: Mapping[str, Iterable[MatchResult]], path: Path) -> None:
    _to_file(write_results, elements, path)


def array_to_string(elements: Iterable) -> str | None:
    return _to_string(write_array, elements)


def object_to_string(elements: Mapping[str, Any]) -> str | None:
    return _to_string(write_object, elements)


def nested_array_to_string(elements: Mapping[str, Iterable]) -> str | None:
    return _to_string(write_nested_array, elements)


def nested_object_to_string(elements: Mapping[str, Mapping[str, Iterable]]) -> str | None:
    return _to_string(write_nested_object, elements)


def results_to_string(elements: Mapping[str, Iterable[MatchResult]]) -> str | None:
    return _to_string(write_results, elements)

# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from spelltrie.pretty import CustomJsonEncoder, flatten_list, format_item, print_table, TableLayout, yield_table
from typing import Any

import datetime
import io
import json
import pytest


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        ("a_string", "a_string"),
        (None, ""),
        (True, "true"),
        (False, "false"),
        (["cut", "cat"], "cut, cat"),
        ({"cut", "cat", "cot"}, "cat, cot, cut"),
        (datetime.timedelta(microseconds=42), "42us"),
        (datetime.timedelta(milliseconds=25), "25ms"),
        ({"b": 1, "a": datetime.timedelta(seconds=1)}, '{"a": 1.0, "b": 1}'),
    ],
)
def test_format_item(value: Any, expected: str) -> None:
    assert format_item(None, value) == expected


def test_json_encoder() -> None:
    encoded = json.dumps({"elapsed": datetime.timedelta(milliseconds=1500), "words": {"b", "a"}}, cls=CustomJsonEncoder)
    assert json.loads(encoded) == {"elapsed": 1.5, "words": ["a", "b"]}


def test_flatten_list() -> None:
    original_list: TableLayout = [["column1", "column2", "column3"], "detail1", "detail2"]
    flat_list = flatten_list(original_list)
    assert original_list == [["column1", "column2", "column3"], "detail1", "detail2"]  # ensure it doesn't have side effects
    assert flat_list == ["column1", "column2", "column3", "detail1", "detail2"]


def test_yield_table() -> None:
    rows = [
        {"word": "cit", "status": "corrected", "suggestions": ["cat", "cot"]},
        {"word": "cat", "status": "exact", "suggestions": ["cat"]},
        {"word": "xyz", "status": "unknown", "suggestions": []},
    ]
    lines = list(yield_table(rows, table_layout=[["word", "status"], "suggestions"]))
    assert lines == [
        "WORD  STATUS",
        "====  =========",
        "cit   corrected",
        "    suggestions = cat, cot",
        "",
        "cat   exact",
        "    suggestions = cat",
        "",
        "xyz   unknown",
    ]


def test_yield_table_default_layout_sorts_fields() -> None:
    rows = [{"word": "cat", "found": True}]
    lines = list(yield_table(rows))
    assert lines == ["FOUND  WORD", "=====  ====", "true   cat"]


def test_print_table() -> None:
    rows = [{"word": "cat", "found": True}, {"word": "ca", "found": False}]
    output = io.StringIO()
    print_table(rows, table_layout=["word", "found"], file=output)
    assert output.getvalue().splitlines() == [
        "WORD  FOUND",
        "====  =====",
        "cat   true",
        "ca    false",
    ]


def test_print_table_plain_values() -> None:
    output = io.StringIO()
    print_table(["cat", "cot"], file=output)
    assert output.getvalue() == "cat\ncot\n"
    output = io.StringIO()
    print_table([], file=output)
    assert output.getvalue() == ""

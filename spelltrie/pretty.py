# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print result records as tables"""
from __future__ import annotations

from typing import Any, cast, Collection, Iterator, List, Mapping, TextIO, Tuple, Union

import datetime
import itertools
import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Collection[Union[List[str], Tuple[str], str]]


class CustomJsonEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, datetime.timedelta):
            return o.total_seconds()
        if isinstance(o, (set, frozenset)):
            return sorted(o)
        return json.JSONEncoder.default(self, o)


def format_elapsed(value: datetime.timedelta) -> str:
    micros = value // datetime.timedelta(microseconds=1)
    if micros >= 10000:
        return "{}ms".format(micros // 1000)
    return "{}us".format(micros)


def format_item(key: str | None, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (set, frozenset)):
        value = sorted(value)
    if isinstance(value, (list, tuple)):
        formatted = ", ".join(format_item(None, entry) for entry in value)
    elif isinstance(value, dict):
        formatted = json.dumps(value, sort_keys=True, cls=CustomJsonEncoder)
    elif isinstance(value, datetime.timedelta):
        formatted = format_elapsed(value)
    elif isinstance(value, bool):
        formatted = "true" if value else "false"
    else:
        formatted = "{}".format(value)

    return formatted


def flatten_list(complex_list: TableLayout | None) -> Collection[str]:
    """Flatten a multi-dimensional list to 1D list"""
    if complex_list is None:
        return []
    flattened_list: list[str] = []
    for level1 in complex_list:
        if isinstance(level1, (list, tuple)):
            flattened_list.extend(flatten_list(level1))
        else:
            flattened_list.append(level1)
    return flattened_list


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
) -> Iterator[str]:
    """
    format a list of dicts in a nicer table format yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Fields to be printed, could be 1D or 2D list. Examples:
        ["word", "status"] or
        [["word", "status"], "suggestions"]
        Fields after the first entry of a 2D layout are printed one per line below each row.
    """
    widths: dict[str, int] = {}
    formatted_values: list[dict[str, str]] = []
    flattened_table_layout = flatten_list(table_layout)
    for item in result:
        formatted_row: dict[str, str] = {}
        formatted_values.append(formatted_row)
        for key, value in item.items():
            if table_layout is not None and key not in flattened_table_layout:
                continue
            formatted_row[key] = format_item(key, value)
            widths[key] = max(len(key), len(formatted_row[key]), widths.get(key, 1))

    # default table layout is one row per item with sorted field names
    if table_layout is None:
        table_layout = sorted(widths)
    if not isinstance(next(iter(table_layout), []), (list, tuple)):
        table_layout = [cast(List[str], table_layout)]

    horizontal_fields: Collection[str] = next(iter(table_layout), [])
    for field in horizontal_fields:
        widths.setdefault(field, len(field))
    yield "  ".join(f.upper().ljust(widths[f]) for f in horizontal_fields).rstrip()
    yield "  ".join("=" * widths[f] for f in horizontal_fields)
    for row_num, formatted_row in enumerate(formatted_values):
        if len(table_layout) > 1 and row_num > 0:
            yield ""
        yield "  ".join(formatted_row.get(f, "").ljust(widths[f]) for f in horizontal_fields).strip()
        fields_to_print: list[tuple[str, str]] = []
        for vertical_field in cast(Iterator[str], itertools.islice(table_layout, 1, None)):
            value = formatted_row.get(vertical_field)
            if value:
                fields_to_print.append((vertical_field, value))
        if fields_to_print:
            max_key_width = max(len(key) for key, _ in fields_to_print)
            for key, value in fields_to_print:
                yield "    {:{}} = {}".format(key, max_key_width, value)


def print_table(
    result: Collection[Any] | ResultType | None,
    table_layout: TableLayout | None = None,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a nicer table format"""

    def yield_rows() -> Iterator[str]:
        if not result:
            return
        elif not isinstance(next(iter(result), None), dict):
            yield from (format_item(None, item) for item in result)
        else:
            table_result = cast(ResultType, result)
            yield from yield_table(table_result, table_layout=table_layout)

    for row in yield_rows():
        print(row, file=file or sys.stdout)

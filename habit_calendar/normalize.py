import logging
from collections.abc import Mapping
from dataclasses import replace
from functools import reduce

from . import dates
from .errors import InvalidRequestError
from .model import (
    FORMAT_TEXT,
    CalendarData,
    CalendarRequest,
    Entry,
    EntryList,
    Link,
    TableResult,
)

logger = logging.getLogger(__name__)


def is_table_data(data) -> bool:
    """クエリ結果の表 ({successful, value: {type: "table"}}) かどうか"""
    if not isinstance(data, Mapping) or not data.get("successful"):
        return False
    value = data.get("value")
    return isinstance(value, Mapping) and value.get("type") == "table"


def _to_entry(item) -> Entry:
    if isinstance(item, Entry):
        return item
    if isinstance(item, Mapping):
        return Entry(
            date=str(item.get("date") or ""),
            content=item.get("content") or "",
            link=item.get("link") or "",
        )
    raise InvalidRequestError(f"unsupported entry: {item!r}")


def classify_data(data) -> EntryList | TableResult:
    """入力を EntryList か TableResult のどちらかに決める"""
    if isinstance(data, (EntryList, TableResult)):
        return data
    if is_table_data(data):
        value = data["value"]
        headers = value.get("headers") or ()
        rows = value.get("values") or ()
        if not _is_sequence(headers) or not _is_sequence(rows):
            raise InvalidRequestError("table headers and values must be lists")
        if not all(_is_sequence(row) for row in rows):
            raise InvalidRequestError("every table row must be a list")
        return TableResult(
            headers=tuple(headers),
            rows=tuple(tuple(row) for row in rows),
        )
    if data is None:
        return EntryList()
    if not _is_sequence(data):
        raise InvalidRequestError(f"data must be a list of entries or a table, got {type(data).__name__}")
    return EntryList(tuple(_to_entry(item) for item in data))


def _is_sequence(value) -> bool:
    # JSON の配列だけを受け付ける
    return isinstance(value, (list, tuple))


def _to_link(cell) -> Link | None:
    if isinstance(cell, Link):
        return cell
    if isinstance(cell, Mapping) and cell.get("path"):
        return Link(path=str(cell["path"]), display=str(cell.get("display") or ""))
    if isinstance(cell, str) and cell:
        return Link(path=cell)
    return None


def header_label(headers, index: int) -> str:
    # "mood|M" なら "M" を使う
    if index >= len(headers):
        return ""
    return str(headers[index]).split("|")[-1]


def _merge_row(merged: dict, row, headers, date_pattern: str) -> dict:
    link = _to_link(row[0]) if row else None
    if link is None or not dates.is_valid(link.file_name, date_pattern):
        logger.debug("skip row with unparsable date: %r", row[:1])
        return merged

    date_string = link.file_name
    lines = "".join(
        f"{header_label(headers, ci)} {value}\n"
        for ci, value in enumerate(row[1:], start=1)
        if value
    )
    # 同じ日付の行はひとつにまとめる. link は最初の行のもの
    entry = merged.get(date_string) or Entry(date=date_string, content="", link=link.path)
    return {**merged, date_string: replace(entry, content=entry.content + lines)}


def table_to_entries(table: TableResult, date_pattern: str) -> tuple[Entry, ...]:
    merged = reduce(
        lambda acc, row: _merge_row(acc, row, table.headers, date_pattern),
        table.rows,
        {},
    )
    return tuple(merged.values())


def normalize(params) -> CalendarData:
    if isinstance(params, CalendarRequest):
        request = params
    elif isinstance(params, Mapping):
        request = CalendarRequest.from_params(params)
    else:
        raise InvalidRequestError(f"calendar params must be a mapping, got {type(params).__name__}")

    date_pattern = request.resolved_date_pattern
    data = classify_data(request.data)

    if data.kind == "table":
        # 表のセルは HTML / Markdown として描画しない
        entries = table_to_entries(data, date_pattern)
        fmt = FORMAT_TEXT
    else:
        entries = data.entries
        fmt = request.format

    return CalendarData(
        year=request.year,
        month=request.month,
        width=request.width,
        filepath=request.filepath,
        format=fmt,
        entries=entries,
        date_pattern=date_pattern,
    )

import posixpath
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .dates import DEFAULT_DATE_PATTERN
from .settings import Settings

FORMAT_TEXT = "text"
FORMAT_HTML = "html"
FORMAT_MARKDOWN = "markdown"
FORMATS = (FORMAT_TEXT, FORMAT_HTML, FORMAT_MARKDOWN)

DEFAULT_WIDTH = "100%"


@dataclass(frozen=True)
class Entry:
    date: str
    content: str = ""
    link: str = ""


@dataclass(frozen=True)
class Link:
    """表の 1 列目. ファイル名が日付になっている"""
    path: str
    display: str = ""

    @property
    def file_name(self) -> str:
        # "daily/2024-02-10.md" -> "2024-02-10"
        return posixpath.splitext(posixpath.basename(self.path))[0]


@dataclass(frozen=True)
class EntryList:
    entries: tuple[Entry, ...] = ()
    kind: str = field(default="entries", init=False)


@dataclass(frozen=True)
class TableResult:
    headers: tuple[str, ...] = ()
    rows: tuple[tuple, ...] = ()
    kind: str = field(default="table", init=False)


def _coerce_int(value):
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return value


@dataclass(frozen=True)
class CalendarRequest:
    year: int
    month: int
    format: str = FORMAT_TEXT
    width: str = DEFAULT_WIDTH
    date_pattern: str = ""
    note_pattern: str = ""  # 非推奨. date_pattern を使う
    filepath: str = ""
    data: object = None

    @classmethod
    def from_params(cls, params: Mapping) -> "CalendarRequest":
        return cls(
            year=_coerce_int(params.get("year")),
            month=_coerce_int(params.get("month")),
            format=params.get("format") or FORMAT_TEXT,
            width=params.get("width") or DEFAULT_WIDTH,
            date_pattern=params.get("date_pattern") or params.get("datePattern") or "",
            note_pattern=params.get("note_pattern") or "",
            filepath=params.get("filepath") or "",
            data=params.get("data", params.get("rawData")),
        )

    @property
    def resolved_date_pattern(self) -> str:
        # date_pattern > note_pattern > デフォルト
        return self.date_pattern or self.note_pattern or DEFAULT_DATE_PATTERN


@dataclass(frozen=True)
class CalendarData:
    year: int
    month: int
    width: str
    filepath: str
    format: str
    entries: tuple[Entry, ...]
    date_pattern: str


@dataclass(frozen=True)
class Geometry:
    first_weekday: int
    days_in_month: int
    weeks: tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class RenderContext:
    settings: Settings
    start_of_week: int = 0
    first_weekday: int = 0
    days_in_month: int = 0
    display_month: str = ""
    table_width: str = ""
    weeks: tuple[tuple[int, ...], ...] = ()
    day_to_entry: Mapping = field(default_factory=lambda: MappingProxyType({}))
    format: str = FORMAT_TEXT
    filepath: str = ""
    error: str | None = None

from .binder import bind_entries_to_days
from .context import build_context
from .errors import HabitCalendarError, InvalidMonthError, InvalidRequestError
from .geometry import compute_geometry, partition_weeks, weekday_labels
from .markdown_render import MarkdownRenderer, NullMarkdownRenderer
from .markup import Element
from .model import (
    CalendarData,
    CalendarRequest,
    Entry,
    EntryList,
    Geometry,
    Link,
    RenderContext,
    TableResult,
)
from .normalize import classify_data, normalize
from .render import render, render_calendar
from .settings import WEEKDAYS, Settings

__all__ = [
    "CalendarData",
    "CalendarRequest",
    "Element",
    "Entry",
    "EntryList",
    "Geometry",
    "HabitCalendarError",
    "InvalidMonthError",
    "InvalidRequestError",
    "Link",
    "MarkdownRenderer",
    "NullMarkdownRenderer",
    "RenderContext",
    "Settings",
    "TableResult",
    "WEEKDAYS",
    "bind_entries_to_days",
    "build_context",
    "classify_data",
    "compute_geometry",
    "normalize",
    "partition_weeks",
    "render",
    "render_calendar",
    "weekday_labels",
]

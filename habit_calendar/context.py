import logging
from dataclasses import replace

from . import dates
from .binder import bind_entries_to_days
from .errors import InvalidMonthError
from .geometry import compute_geometry
from .model import CalendarData, RenderContext
from .settings import Settings

logger = logging.getLogger(__name__)


def build_context(calendar_data: CalendarData, settings: Settings) -> RenderContext:
    start_of_week = settings.start_of_week_index
    base = RenderContext(
        settings=settings,
        start_of_week=start_of_week,
        format=calendar_data.format,
        filepath=calendar_data.filepath,
    )

    try:
        geometry = compute_geometry(calendar_data.year, calendar_data.month, start_of_week)
    except InvalidMonthError as exc:
        logger.info("%s", exc)
        return replace(base, error=str(exc))

    first = dates.month_start(calendar_data.year, calendar_data.month)
    return RenderContext(
        settings=settings,
        start_of_week=start_of_week,
        first_weekday=geometry.first_weekday,
        days_in_month=geometry.days_in_month,
        display_month=dates.format_date(first, settings.month_format),
        table_width=calendar_data.width or "",
        weeks=geometry.weeks,
        day_to_entry=bind_entries_to_days(
            calendar_data.entries,
            calendar_data.year,
            calendar_data.month,
            calendar_data.date_pattern,
        ),
        format=calendar_data.format,
        filepath=calendar_data.filepath,
    )

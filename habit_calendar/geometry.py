from . import dates
from .errors import InvalidMonthError
from .model import Geometry
from .settings import Settings

DAYS_PER_WEEK = 7


def leading_blanks(first_weekday: int, start_of_week: int) -> int:
    """1 日より前に置く空セルの数"""
    if first_weekday >= start_of_week:
        return first_weekday - start_of_week
    return DAYS_PER_WEEK - start_of_week + first_weekday


def partition_weeks(first_weekday: int, days_in_month: int, start_of_week: int = 0) -> tuple[tuple[int, ...], ...]:
    # 0 は「その月の日ではない」セル
    cells = [0] * leading_blanks(first_weekday, start_of_week % DAYS_PER_WEEK)
    cells.extend(range(1, days_in_month + 1))
    cells.extend([0] * (-len(cells) % DAYS_PER_WEEK))
    return tuple(
        tuple(cells[i:i + DAYS_PER_WEEK])
        for i in range(0, len(cells), DAYS_PER_WEEK)
    )


def compute_geometry(year, month, start_of_week: int = 0) -> Geometry:
    first = dates.month_start(year, month)
    if first is None:
        raise InvalidMonthError(year, month)

    first_weekday = dates.weekday(first)
    days_in_month = dates.days_in_month(first)
    return Geometry(
        first_weekday=first_weekday,
        days_in_month=days_in_month,
        weeks=partition_weeks(first_weekday, days_in_month, start_of_week),
    )


def weekday_labels(settings: Settings) -> tuple[str, ...]:
    labels = settings.weekday_labels
    start = settings.start_of_week_index
    return tuple(labels[(i + start) % DAYS_PER_WEEK] for i in range(DAYS_PER_WEEK))

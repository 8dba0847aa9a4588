import logging
from types import MappingProxyType

from . import dates
from .model import Entry

logger = logging.getLogger(__name__)


def bind_entries_to_days(entries, year, month, date_pattern: str) -> MappingProxyType:
    """
    year / month に入るエントリだけを日ごとにまとめる
    同じ日に複数あれば後のものが勝つ
    """
    marks: dict[int, Entry] = {}
    for entry in entries:
        d = dates.parse(entry.date, date_pattern)
        if d is None:
            logger.debug("skip entry with unparsable date %r (pattern %r)", entry.date, date_pattern)
            continue
        if d.year == year and d.month == month:
            marks[d.day] = entry
    return MappingProxyType(marks)

"""
pendulum のラッパー

"YYYY-MM-DD" のような moment 形式のパターンで日付文字列を読み書きする.
"""
import pendulum

DEFAULT_DATE_PATTERN = "YYYY-MM-DD"
MONTH_PATTERN = "YYYY-M"


def parse(value, pattern: str = DEFAULT_DATE_PATTERN) -> pendulum.DateTime | None:
    """
    value を pattern で読む. 読めない (存在しない日付を含む) ときは None
    文字列全体がパターンに一致する必要がある. "2024-02-10 notes" のように
    後ろに文字が続くファイル名は "YYYY-MM-DD" では読めない
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        return pendulum.from_format(value, pattern)
    except ValueError:
        return None


def is_valid(value, pattern: str = DEFAULT_DATE_PATTERN) -> bool:
    return parse(value, pattern) is not None


def month_start(year, month) -> pendulum.DateTime | None:
    return parse(f"{year}-{month}", MONTH_PATTERN)


def weekday(dt: pendulum.DateTime) -> int:
    # 0: 日曜 .. 6: 土曜
    return dt.isoweekday() % 7


def days_in_month(dt: pendulum.DateTime) -> int:
    return dt.days_in_month


def format_date(dt: pendulum.DateTime, pattern: str) -> str:
    return dt.format(pattern)

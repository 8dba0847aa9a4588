class HabitCalendarError(Exception):
    """habit_calendar が投げる例外の基底クラス"""


class InvalidRequestError(HabitCalendarError):
    pass


class InvalidMonthError(HabitCalendarError):
    def __init__(self, year, month):
        self.year = year
        self.month = month
        super().__init__(f"Fail: Invalid Date {year}-{month}")

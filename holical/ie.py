"""Holidays of the Republic of Ireland."""

from datetime import date
from typing import Optional

from holical.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

_MONDAY = 0
_FRIDAY = 4


def calc_if_first_falls_on_friday(h: Holiday, year: int) -> Optional[date]:
    """The 1st of the month if it is a Friday, else the nth given weekday of the month."""
    first = date(year, h.month, 1)
    if first.weekday() == _FRIDAY:
        return first
    return calc_weekday_offset(h, year)


NEW_YEAR = Holiday(
    name="New Year's Day",
    type=ObservanceType.PUBLIC,
    month=1,
    day=1,
    func=calc_day_of_month,
)
SAINT_BRIGID_DAY = Holiday(
    name="Saint Brigid’s Day",
    month=2,
    weekday=_MONDAY,
    offset=1,
    func=calc_if_first_falls_on_friday,
    start_year=2023,
)
EXTRA_PUBLIC_HOLIDAY_2022 = Holiday(
    name="Extra Public Holiday 2022",
    month=3,
    day=18,
    start_year=2022,
    end_year=2022,
    func=calc_day_of_month,
)
SAINT_PATRICK_DAY = Holiday(
    name="Saint Patrick's Day", month=3, day=17, func=calc_day_of_month
)
EASTER_MONDAY = Holiday(
    name="Easter Monday",
    type=ObservanceType.RELIGIOUS,
    offset=1,
    func=calc_easter_offset,
)
FIRST_MONDAY_MAY = Holiday(
    name="First Monday in May", month=5, weekday=_MONDAY, offset=1, func=calc_weekday_offset
)
FIRST_MONDAY_JUNE = Holiday(
    name="First Monday in June", month=6, weekday=_MONDAY, offset=1, func=calc_weekday_offset
)
FIRST_MONDAY_AUGUST = Holiday(
    name="First Monday in August", month=8, weekday=_MONDAY, offset=1, func=calc_weekday_offset
)
LAST_MONDAY_IN_OCTOBER = Holiday(
    name="Last Monday in October",
    type=ObservanceType.PUBLIC,
    month=10,
    weekday=_MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)
CHRISTMAS_DAY = Holiday(
    name="Christmas Day",
    type=ObservanceType.RELIGIOUS,
    month=12,
    day=25,
    func=calc_day_of_month,
)
SAINT_STEPHEN_DAY = Holiday(
    name="Saint Stephen's Day",
    type=ObservanceType.RELIGIOUS,
    month=12,
    day=26,
    func=calc_day_of_month,
)

HOLIDAYS = [
    NEW_YEAR,
    EXTRA_PUBLIC_HOLIDAY_2022,
    SAINT_BRIGID_DAY,
    SAINT_PATRICK_DAY,
    EASTER_MONDAY,
    FIRST_MONDAY_MAY,
    FIRST_MONDAY_JUNE,
    FIRST_MONDAY_AUGUST,
    LAST_MONDAY_IN_OCTOBER,
    CHRISTMAS_DAY,
    SAINT_STEPHEN_DAY,
]
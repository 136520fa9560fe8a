"""Holidays, work days and the rules that place them in a year.

Each holiday carries a calculation function that finds the day it
falls on in a given year. Start and end years, exception years, a
fixed offset and weekend substitution rules are then applied by
:meth:`Holiday.calc`. All calculations use the Gregorian calendar.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from enum import IntEnum
from typing import Callable, Iterable, Optional, Tuple

__all__ = [
    "ObservanceType",
    "AltDay",
    "Holiday",
    "HolidayFn",
    "calc_day_of_month",
    "calc_weekday_offset",
    "calc_weekday_from",
    "calc_easter_offset",
]


class ObservanceType(IntEnum):
    """The kind of holiday or special day being observed."""

    UNKNOWN = 0
    PUBLIC = 1
    BANK = 2
    RELIGIOUS = 3
    OTHER = 4


@dataclass(frozen=True)
class AltDay:
    """An alternative day to observe a holiday.

    ``day`` is a weekday number (Monday is 0, as in :mod:`calendar`);
    ``offset`` moves the observance forward (positive) or back (negative).
    """

    day: int
    offset: int


HolidayFn = Callable[["Holiday", int], Optional[date]]

_CLONE_FIELDS = frozenset(
    {"name", "description", "type", "start_year", "end_year", "except_years", "observed"}
)


def _override_is_set(key: str, value: object) -> bool:
    if key in ("name", "description"):
        return value != ""
    if key == "type":
        return value != ObservanceType.UNKNOWN
    if key in ("start_year", "end_year"):
        return value > 0  # type: ignore[operator]
    return value is not None


@dataclass(frozen=True)
class Holiday:
    """Information about the type and occurrence of a holiday."""

    name: str = ""
    description: str = ""
    type: ObservanceType = ObservanceType.UNKNOWN
    start_year: int = 0
    end_year: int = 0
    except_years: Tuple[int, ...] = ()
    month: int = 0
    day: int = 0
    weekday: int = 0
    offset: int = 0
    calc_offset: int = 0
    julian: bool = False
    observed: Optional[Tuple[AltDay, ...]] = None
    func: Optional[HolidayFn] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "except_years", tuple(self.except_years))
        if self.observed is not None:
            object.__setattr__(self, "observed", tuple(self.observed))

    def clone(self, **kwargs: object) -> "Holiday":
        """Return a copy, replacing the given descriptive fields.

        Only name, description, type, start_year, end_year, except_years and
        observed may be overridden. Empty strings, an unknown type, years not
        above zero and ``None`` leave the original value in place.
        """
        unknown = set(kwargs) - _CLONE_FIELDS
        if unknown:
            raise TypeError(f"cannot override field(s): {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in kwargs.items() if _override_is_set(k, v)}
        return replace(self, **changes)

    def calc(self, year: int) -> Tuple[Optional[date], Optional[date]]:
        """Return the actual and observed dates of the holiday in ``year``.

        Both are ``None`` if the holiday is not observed that year.
        """
        if (
            (self.start_year > 0 and year < self.start_year)
            or (self.end_year > 0 and year > self.end_year)
            or self.func is None
            or year in self.except_years
        ):
            return None, None

        actual = self.func(self, year)
        if actual is None:
            return None, None
        if self.calc_offset:
            actual += timedelta(days=self.calc_offset)

        for alt in self.observed or ():
            if alt.day == actual.weekday():
                return actual, actual + timedelta(days=alt.offset)
        return actual, actual


def _normalized(year: int, month: int, day: int) -> date:
    """Build a date, letting days outside the month roll over."""
    return date(year, month, 1) + timedelta(days=day - 1)


def _weekday_n(year: int, month: int, weekday: int, n: int) -> Optional[date]:
    """The nth ``weekday`` of the month, counting from the end if n < 0."""
    if n == 0:
        return None
    if n > 0:
        first = date(year, month, 1)
        result = first + timedelta(days=(weekday - first.weekday()) % 7 + 7 * (n - 1))
    else:
        last = date(year, month, calendar.monthrange(year, month)[1])
        result = last - timedelta(days=(last.weekday() - weekday) % 7 + 7 * (-n - 1))
    return result if result.month == month else None


def _weekday_n_from(start: date, weekday: int, n: int) -> Optional[date]:
    """The nth ``weekday`` on or after ``start``, or on or before it if n < 0."""
    if n == 0:
        return None
    if n > 0:
        return start + timedelta(days=(weekday - start.weekday()) % 7 + 7 * (n - 1))
    return start - timedelta(days=(start.weekday() - weekday) % 7 + 7 * (-n - 1))


def calc_day_of_month(h: Holiday, year: int) -> date:
    """A holiday on a fixed day of a month, such as 5 November."""
    return _normalized(year, h.month, h.day)


def calc_weekday_offset(h: Holiday, year: int) -> Optional[date]:
    """A holiday on the nth weekday of a month, such as the third Wednesday of July."""
    return _weekday_n(year, h.month, h.weekday, h.offset)


def calc_weekday_from(h: Holiday, year: int) -> Optional[date]:
    """A holiday on the nth given weekday counted from a starting date."""
    return _weekday_n_from(_normalized(year, h.month, h.day), h.weekday, h.offset)


def calc_easter_offset(h: Holiday, year: int) -> date:
    """A holiday placed relative to Easter, Western or (if ``julian``) Orthodox."""
    if h.julian:
        # Meeus algorithm, shifted into the Gregorian calendar
        a = year % 4
        b = year % 7
        c = year % 19
        d = (19 * c + 15) % 30
        e = (2 * a + 4 * b - d + 34) % 7
        month = (d + e + 114) // 31
        day = (d + e + 114) % 31 + 1 + 13
    else:
        # Meeus/Jones/Butcher algorithm
        a = year % 19
        b = year // 100
        c = year % 100
        d = b // 4
        e = b % 4
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        hh = (19 * a + b - d - g + 15) % 30
        i = c // 4
        k = c % 4
        l = (32 + 2 * e + 2 * i - hh - k) % 7
        m = (a + 11 * hh + 22 * l) // 451
        month = (hh + l - 7 * m + 114) // 31
        day = (hh + l - 7 * m + 114) % 31 + 1
    return _normalized(year, month, day + h.offset)


def _as_tuple(items: Iterable[AltDay]) -> Tuple[AltDay, ...]:
    return tuple(items)
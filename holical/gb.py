"""Bank holidays of the United Kingdom."""

from holical.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

_BANK = ObservanceType.BANK
_MONDAY = 0
_SATURDAY = 5
_SUNDAY = 6

# Saturdays and Sundays both move to the following Monday.
WEEKEND_ALT = (AltDay(day=_SATURDAY, offset=2), AltDay(day=_SUNDAY, offset=1))

NEW_YEAR = Holiday(
    name="New Year's Day",
    type=_BANK,
    month=1,
    day=1,
    observed=WEEKEND_ALT,
    func=calc_day_of_month,
)
GOOD_FRIDAY = Holiday(name="Good Friday", type=_BANK, offset=-2, func=calc_easter_offset)
EASTER_MONDAY = Holiday(name="Easter Monday", type=_BANK, offset=1, func=calc_easter_offset)
EARLY_MAY = Holiday(
    name="Early May",
    type=_BANK,
    month=5,
    weekday=_MONDAY,
    offset=1,
    func=calc_weekday_offset,
    except_years=(2020,),
)
VE_DAY = Holiday(
    name="VE Day",
    type=_BANK,
    month=5,
    day=8,
    func=calc_day_of_month,
    start_year=2020,
    end_year=2020,
)
SPRING_HOLIDAY = Holiday(
    name="Spring Bank Holiday",
    type=_BANK,
    month=5,
    weekday=_MONDAY,
    offset=-1,
    func=calc_weekday_offset,
    except_years=(2022,),
)
SPRING_HOLIDAY_2022 = Holiday(
    name="Spring Bank Holiday",
    type=_BANK,
    month=6,
    day=2,
    func=calc_day_of_month,
    start_year=2022,
    end_year=2022,
)
PLATINUM_JUBILEE = Holiday(
    name="Platinum Jubilee Bank Holiday",
    type=_BANK,
    month=6,
    day=3,
    func=calc_day_of_month,
    start_year=2022,
    end_year=2022,
)
SUMMER_HOLIDAY_SCOTLAND = Holiday(
    name="Summer Bank Holiday",
    type=_BANK,
    month=8,
    weekday=_MONDAY,
    offset=1,
    func=calc_weekday_offset,
)
SUMMER_HOLIDAY = Holiday(
    name="Summer Bank Holiday",
    type=_BANK,
    month=8,
    weekday=_MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)
CHRISTMAS_DAY = Holiday(
    name="Christmas Day",
    type=_BANK,
    month=12,
    day=25,
    observed=WEEKEND_ALT,
    func=calc_day_of_month,
)
BOXING_DAY = Holiday(
    name="Boxing Day",
    type=_BANK,
    month=12,
    day=26,
    observed=(
        AltDay(day=_SATURDAY, offset=2),
        AltDay(day=_SUNDAY, offset=2),
        AltDay(day=_MONDAY, offset=1),
    ),
    func=calc_day_of_month,
)

HOLIDAYS = [
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    EARLY_MAY,
    VE_DAY,
    SPRING_HOLIDAY,
    SPRING_HOLIDAY_2022,
    PLATINUM_JUBILEE,
    SUMMER_HOLIDAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
]
"""Holidays of the European Central Bank."""

from holical.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_BANK = ObservanceType.BANK

NEW_YEAR = Holiday(name="New Year's Day", type=_BANK, month=1, day=1, func=calc_day_of_month)
GOOD_FRIDAY = Holiday(name="Good Friday", type=_BANK, offset=-2, func=calc_easter_offset)
EASTER_MONDAY = Holiday(name="Easter Monday", type=_BANK, offset=1, func=calc_easter_offset)
LABOUR_DAY = Holiday(name="Labour Day", type=_BANK, month=5, day=1, func=calc_day_of_month)
CHRISTMAS_DAY = Holiday(name="Christmas Day", type=_BANK, month=12, day=25, func=calc_day_of_month)
CHRISTMAS_HOLIDAY = Holiday(
    name="Christmas Holiday", type=_BANK, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = [
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    CHRISTMAS_DAY,
    CHRISTMAS_HOLIDAY,
]
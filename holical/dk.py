"""Holidays of Denmark."""

from holical.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

NYTAARSDAG = Holiday(name="Nytårsdag", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)
SKAERTORSDAG = Holiday(name="Skærtorsdag", type=_PUBLIC, offset=-3, func=calc_easter_offset)
LANGFREDAG = Holiday(name="Langfredag", type=_PUBLIC, offset=-2, func=calc_easter_offset)
ANDEN_PAASKEDAG = Holiday(name="Anden påskedag", type=_PUBLIC, offset=1, func=calc_easter_offset)
STORE_BEDEDAG = Holiday(name="Store bededag", type=_PUBLIC, offset=26, func=calc_easter_offset)
KRISTI_HIMMELFARTSDAG = Holiday(
    name="Kristi Himmelfartsdag", type=_PUBLIC, offset=39, func=calc_easter_offset
)
ANDEN_PINSEDAG = Holiday(name="Anden Pinsedag", type=_PUBLIC, offset=50, func=calc_easter_offset)
GRUNDLOVSDAG = Holiday(name="Grundlovsdag", type=_PUBLIC, month=6, day=5, func=calc_day_of_month)
JULEDAG = Holiday(name="Juledag", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)
ANDEN_JULEDAG = Holiday(name="Anden juledag", type=_PUBLIC, month=12, day=26, func=calc_day_of_month)

HOLIDAYS = [
    NYTAARSDAG,
    SKAERTORSDAG,
    LANGFREDAG,
    ANDEN_PAASKEDAG,
    STORE_BEDEDAG,
    KRISTI_HIMMELFARTSDAG,
    ANDEN_PINSEDAG,
    GRUNDLOVSDAG,
    JULEDAG,
    ANDEN_JULEDAG,
]
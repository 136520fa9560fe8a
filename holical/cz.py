"""Holidays of the Czech Republic."""

from holical.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

NEW_YEAR = Holiday(name="Nový rok", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)
GOOD_FRIDAY = Holiday(name="Velký pátek", type=_PUBLIC, offset=-2, func=calc_easter_offset)
EASTER_MONDAY = Holiday(
    name="Velikonoční pondělí", type=_PUBLIC, offset=1, func=calc_easter_offset
)
LABOUR_DAY = Holiday(name="Svátek práce", type=_PUBLIC, month=5, day=1, func=calc_day_of_month)
LIBERATION_DAY = Holiday(
    name="Den osvobození", type=_PUBLIC, month=5, day=8, func=calc_day_of_month
)
SAINTS_CYRIL_METHODIUS = Holiday(
    name="Den slovanských věrozvěstů Cyrila a Metoděje",
    type=_PUBLIC,
    month=7,
    day=5,
    func=calc_day_of_month,
)
JAN_HUS_DAY = Holiday(
    name="Den upálení mistra Jana Husa", type=_PUBLIC, month=7, day=6, func=calc_day_of_month
)
SAINT_WENCESLAS_DAY = Holiday(
    name="Den české státnosti", type=_PUBLIC, month=9, day=28, func=calc_day_of_month
)
INDEPENDENCE_DAY = Holiday(
    name="Den vzniku samostatného československého státu",
    type=_PUBLIC,
    month=10,
    day=28,
    func=calc_day_of_month,
)
FREEDOM_DAY = Holiday(
    name="Den boje za svobodu a demokracii",
    type=_PUBLIC,
    month=11,
    day=17,
    func=calc_day_of_month,
)
CHRISTMAS_EVE = Holiday(name="Štědrý den", type=_PUBLIC, month=12, day=24, func=calc_day_of_month)
CHRISTMAS_DAY = Holiday(
    name="1. svátek vánoční", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)
SAINT_STEPHENS_DAY = Holiday(
    name="2. svátek vánoční", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = [
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    LIBERATION_DAY,
    SAINTS_CYRIL_METHODIUS,
    JAN_HUS_DAY,
    SAINT_WENCESLAS_DAY,
    INDEPENDENCE_DAY,
    FREEDOM_DAY,
    CHRISTMAS_EVE,
    CHRISTMAS_DAY,
    SAINT_STEPHENS_DAY,
]
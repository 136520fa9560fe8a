"""Holidays of Germany, nationally and per federal state."""

from holical.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_from,
)

_PUBLIC = ObservanceType.PUBLIC
_WEDNESDAY = 2

NEUJAHR = Holiday(name="Neujahrstag", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)
HEILIGE_DREI_KOENIGE = Holiday(
    name="Heilige Drei Könige", type=_PUBLIC, month=1, day=6, func=calc_day_of_month
)
FRAUENTAG = Holiday(name="Frauentag", type=_PUBLIC, month=3, day=8, func=calc_day_of_month)
KARFREITAG = Holiday(name="Karfreitag", type=_PUBLIC, offset=-2, func=calc_easter_offset)
OSTERMONTAG = Holiday(name="Ostermontag", type=_PUBLIC, offset=1, func=calc_easter_offset)
TAG_DER_ARBEIT = Holiday(
    name="Tag der Arbeit", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)
CHRISTI_HIMMELFAHRT = Holiday(
    name="Christi Himmelfahrt", type=_PUBLIC, offset=39, func=calc_easter_offset
)
PFINGSTMONTAG = Holiday(name="Pfingstmontag", type=_PUBLIC, offset=50, func=calc_easter_offset)
FRONLEICHNAM = Holiday(name="Fronleichnam", type=_PUBLIC, offset=60, func=calc_easter_offset)
MARIA_HIMMELFAHRT = Holiday(
    name="Mariä Himmelfahrt", type=_PUBLIC, month=8, day=15, func=calc_day_of_month
)
WELTKINDERTAG = Holiday(
    name="Weltkindertag",
    type=_PUBLIC,
    month=9,
    day=20,
    func=calc_day_of_month,
    start_year=2019,
)
DEUTSCHEN_EINHEIT = Holiday(
    name="Tag der Deutschen Einheit", type=_PUBLIC, month=10, day=3, func=calc_day_of_month
)
REFORMATIONSTAG = Holiday(
    name="Reformationstag", type=_PUBLIC, month=10, day=31, func=calc_day_of_month
)
ALLERHEILIGEN = Holiday(name="Allerheiligen", type=_PUBLIC, month=11, day=1, func=calc_day_of_month)
BUSS_UND_BETTAG = Holiday(
    name="Buß- und Bettag",
    type=_PUBLIC,
    month=11,
    day=16,
    weekday=_WEDNESDAY,
    offset=1,
    func=calc_weekday_from,
)
WEIHNACHTSTAG = Holiday(
    name="Weihnachtstag", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)
ZWEITER_WEIHNACHTSFEIERTAG = Holiday(
    name="Zweiter Weihnachtsfeiertag", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_BW = [
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_BY = [
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_BE = [
    NEUJAHR,
    FRAUENTAG,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_BB = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_HB = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_HH = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_HE = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_MV = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_NI = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_NW = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_RP = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_SL = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    MARIA_HIMMELFAHRT,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_SN = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    BUSS_UND_BETTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_ST = [
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_SH = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_TH = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    WELTKINDERTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]
"""Holidays of Switzerland, nationally and per canton."""

from holical.holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

NEUJAHR = Holiday(name="Neujahrstag", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)
BERCHTOLDSTAG = Holiday(name="Berchtoldstag", month=1, day=2, func=calc_day_of_month)
HEILIGE_DREI_KOENIGE = Holiday(
    name="Heilige Drei Könige", type=_PUBLIC, month=1, day=6, func=calc_day_of_month
)
JOSEFSTAG = Holiday(name="Josefstag", month=3, day=19, func=calc_day_of_month)
KARFREITAG = Holiday(name="Karfreitag", type=_PUBLIC, offset=-2, func=calc_easter_offset)
OSTERMONTAG = Holiday(name="Ostermontag", type=_PUBLIC, offset=1, func=calc_easter_offset)
TAG_DER_ARBEIT = Holiday(
    name="Tag der Arbeit", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)
AUFFAHRT = Holiday(name="Auffahrt", type=_PUBLIC, offset=39, func=calc_easter_offset)
PFINGSTMONTAG = Holiday(name="Pfingstmontag", type=_PUBLIC, offset=50, func=calc_easter_offset)
FRONLEICHNAM = Holiday(name="Fronleichnam", type=_PUBLIC, offset=60, func=calc_easter_offset)
BUNDESFEIERTAG = Holiday(
    name="Bundesfeiertag", type=_PUBLIC, month=8, day=1, func=calc_day_of_month
)
MARIA_HIMMELFAHRT = Holiday(
    name="Mariä Himmelfahrt", type=_PUBLIC, month=8, day=15, func=calc_day_of_month
)
ALLERHEILIGEN = Holiday(name="Allerheiligen", type=_PUBLIC, month=11, day=1, func=calc_day_of_month)
MARIA_EMPFANGNIS = Holiday(
    name="Mariä Empfängnis",
    type=ObservanceType.RELIGIOUS,
    month=12,
    day=8,
    func=calc_day_of_month,
)
WEIHNACHTSTAG = Holiday(
    name="Weihnachtstag", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)
ZWEITER_WEIHNACHTSFEIERTAG = Holiday(
    name="Zweiter Weihnachtsfeiertag", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = [
    NEUJAHR,
    BERCHTOLDSTAG,
    HEILIGE_DREI_KOENIGE,
    JOSEFSTAG,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_ZH = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_BE = [
    NEUJAHR,
    BERCHTOLDSTAG,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_LU = [
    NEUJAHR,
    JOSEFSTAG,
    KARFREITAG,
    AUFFAHRT,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_UR = [
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    JOSEFSTAG,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_SZ = [
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    JOSEFSTAG,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_OW = [
    NEUJAHR,
    KARFREITAG,
    AUFFAHRT,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
]

HOLIDAYS_NW = [
    NEUJAHR,
    JOSEFSTAG,
    KARFREITAG,
    AUFFAHRT,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
]

HOLIDAYS_GL = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_ZG = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_FR = [
    NEUJAHR,
    KARFREITAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
]

HOLIDAYS_SO = [
    NEUJAHR,
    KARFREITAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_BS = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_BL = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_SH = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_AR = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_AI = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_SG = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_GR = [
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    JOSEFSTAG,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_AG = [
    NEUJAHR,
    BERCHTOLDSTAG,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_TG = [
    NEUJAHR,
    BERCHTOLDSTAG,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_VD = [
    NEUJAHR,
    BERCHTOLDSTAG,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
]

HOLIDAYS_TI = [
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    JOSEFSTAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
]

HOLIDAYS_VS = [
    NEUJAHR,
    JOSEFSTAG,
    AUFFAHRT,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    MARIA_EMPFANGNIS,
    WEIHNACHTSTAG,
]

HOLIDAYS_NE = [
    NEUJAHR,
    KARFREITAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
]

HOLIDAYS_GE = [
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    WEIHNACHTSTAG,
]

HOLIDAYS_JU = [
    NEUJAHR,
    BERCHTOLDSTAG,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    AUFFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    BUNDESFEIERTAG,
    MARIA_HIMMELFAHRT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
]
from datetime import date

import pytest

from holical import ch
from holical.holiday import Holiday

YEARS = range(2015, 2023)

FIXED = [
    (ch.NEUJAHR, 1, 1),
    (ch.BERCHTOLDSTAG, 1, 2),
    (ch.HEILIGE_DREI_KOENIGE, 1, 6),
    (ch.JOSEFSTAG, 3, 19),
    (ch.TAG_DER_ARBEIT, 5, 1),
    (ch.BUNDESFEIERTAG, 8, 1),
    (ch.MARIA_HIMMELFAHRT, 8, 15),
    (ch.ALLERHEILIGEN, 11, 1),
    (ch.MARIA_EMPFANGNIS, 12, 8),
    (ch.WEIHNACHTSTAG, 12, 25),
    (ch.ZWEITER_WEIHNACHTSFEIERTAG, 12, 26),
]

MOVABLE = [
    (ch.KARFREITAG, [(4, 3), (3, 25), (4, 14), (3, 30), (4, 19), (4, 10), (4, 2), (4, 15)]),
    (ch.OSTERMONTAG, [(4, 6), (3, 28), (4, 17), (4, 2), (4, 22), (4, 13), (4, 5), (4, 18)]),
    (ch.AUFFAHRT, [(5, 14), (5, 5), (5, 25), (5, 10), (5, 30), (5, 21), (5, 13), (5, 26)]),
    (ch.PFINGSTMONTAG, [(5, 25), (5, 16), (6, 5), (5, 21), (6, 10), (6, 1), (5, 24), (6, 6)]),
    (ch.FRONLEICHNAM, [(6, 4), (5, 26), (6, 15), (5, 31), (6, 20), (6, 11), (6, 3), (6, 16)]),
]

CASES = [
    (h, y, date(y, m, d)) for h, m, d in FIXED for y in YEARS
] + [
    (h, y, date(y, m, d)) for h, dates in MOVABLE for y, (m, d) in zip(YEARS, dates)
]


@pytest.mark.parametrize(
    "holiday,year,expected", CASES, ids=[f"{h.name}-{y}" for h, y, _ in CASES]
)
def test_holidays(holiday, year, expected):
    actual, observed = Holiday.calc(holiday, year)
    assert actual == expected
    assert observed == expected


CANTON_LISTS = [
    ch.HOLIDAYS, ch.HOLIDAYS_ZH, ch.HOLIDAYS_BE, ch.HOLIDAYS_LU, ch.HOLIDAYS_UR,
    ch.HOLIDAYS_SZ, ch.HOLIDAYS_OW, ch.HOLIDAYS_NW, ch.HOLIDAYS_GL, ch.HOLIDAYS_ZG,
    ch.HOLIDAYS_FR, ch.HOLIDAYS_SO, ch.HOLIDAYS_BS, ch.HOLIDAYS_BL, ch.HOLIDAYS_SH,
    ch.HOLIDAYS_AR, ch.HOLIDAYS_AI, ch.HOLIDAYS_SG, ch.HOLIDAYS_GR, ch.HOLIDAYS_AG,
    ch.HOLIDAYS_TG, ch.HOLIDAYS_VD, ch.HOLIDAYS_TI, ch.HOLIDAYS_VS, ch.HOLIDAYS_NE,
    ch.HOLIDAYS_GE, ch.HOLIDAYS_JU,
]


@pytest.mark.parametrize("holidays", CANTON_LISTS)
def test_every_listed_holiday_falls_in_its_year(holidays):
    for holiday in holidays:
        actual, observed = Holiday.calc(holiday, 2021)
        assert actual.year == 2021
        assert actual == observed


@pytest.mark.parametrize("holidays", CANTON_LISTS)
def test_lists_hold_distinct_days(holidays):
    days = [Holiday.calc(h, 2020)[0] for h in holidays]
    assert len(days) == len(set(days))
    assert ch.NEUJAHR in holidays
from datetime import date

import pytest

from holical import gb
from holical.holiday import Holiday


def d(y, m, dd):
    return date(y, m, dd)


CASES = [
    (gb.NEW_YEAR, 2015, d(2015, 1, 1), d(2015, 1, 1)),
    (gb.NEW_YEAR, 2016, d(2016, 1, 1), d(2016, 1, 1)),
    (gb.NEW_YEAR, 2017, d(2017, 1, 1), d(2017, 1, 2)),
    (gb.NEW_YEAR, 2018, d(2018, 1, 1), d(2018, 1, 1)),
    (gb.NEW_YEAR, 2019, d(2019, 1, 1), d(2019, 1, 1)),
    (gb.NEW_YEAR, 2020, d(2020, 1, 1), d(2020, 1, 1)),
    (gb.NEW_YEAR, 2021, d(2021, 1, 1), d(2021, 1, 1)),
    (gb.NEW_YEAR, 2022, d(2022, 1, 1), d(2022, 1, 3)),
    (gb.GOOD_FRIDAY, 2015, d(2015, 4, 3), d(2015, 4, 3)),
    (gb.GOOD_FRIDAY, 2016, d(2016, 3, 25), d(2016, 3, 25)),
    (gb.GOOD_FRIDAY, 2017, d(2017, 4, 14), d(2017, 4, 14)),
    (gb.GOOD_FRIDAY, 2018, d(2018, 3, 30), d(2018, 3, 30)),
    (gb.GOOD_FRIDAY, 2019, d(2019, 4, 19), d(2019, 4, 19)),
    (gb.GOOD_FRIDAY, 2020, d(2020, 4, 10), d(2020, 4, 10)),
    (gb.GOOD_FRIDAY, 2021, d(2021, 4, 2), d(2021, 4, 2)),
    (gb.GOOD_FRIDAY, 2022, d(2022, 4, 15), d(2022, 4, 15)),
    (gb.EASTER_MONDAY, 2015, d(2015, 4, 6), d(2015, 4, 6)),
    (gb.EASTER_MONDAY, 2016, d(2016, 3, 28), d(2016, 3, 28)),
    (gb.EASTER_MONDAY, 2017, d(2017, 4, 17), d(2017, 4, 17)),
    (gb.EASTER_MONDAY, 2018, d(2018, 4, 2), d(2018, 4, 2)),
    (gb.EASTER_MONDAY, 2019, d(2019, 4, 22), d(2019, 4, 22)),
    (gb.EASTER_MONDAY, 2020, d(2020, 4, 13), d(2020, 4, 13)),
    (gb.EASTER_MONDAY, 2021, d(2021, 4, 5), d(2021, 4, 5)),
    (gb.EASTER_MONDAY, 2022, d(2022, 4, 18), d(2022, 4, 18)),
    (gb.EARLY_MAY, 2015, d(2015, 5, 4), d(2015, 5, 4)),
    (gb.EARLY_MAY, 2016, d(2016, 5, 2), d(2016, 5, 2)),
    (gb.EARLY_MAY, 2017, d(2017, 5, 1), d(2017, 5, 1)),
    (gb.EARLY_MAY, 2018, d(2018, 5, 7), d(2018, 5, 7)),
    (gb.EARLY_MAY, 2019, d(2019, 5, 6), d(2019, 5, 6)),
    (gb.EARLY_MAY, 2020, None, None),
    (gb.EARLY_MAY, 2021, d(2021, 5, 3), d(2021, 5, 3)),
    (gb.EARLY_MAY, 2022, d(2022, 5, 2), d(2022, 5, 2)),
    (gb.VE_DAY, 2015, None, None),
    (gb.VE_DAY, 2016, None, None),
    (gb.VE_DAY, 2017, None, None),
    (gb.VE_DAY, 2018, None, None),
    (gb.VE_DAY, 2019, None, None),
    (gb.VE_DAY, 2020, d(2020, 5, 8), d(2020, 5, 8)),
    (gb.VE_DAY, 2021, None, None),
    (gb.VE_DAY, 2022, None, None),
    (gb.SPRING_HOLIDAY, 2015, d(2015, 5, 25), d(2015, 5, 25)),
    (gb.SPRING_HOLIDAY, 2016, d(2016, 5, 30), d(2016, 5, 30)),
    (gb.SPRING_HOLIDAY, 2017, d(2017, 5, 29), d(2017, 5, 29)),
    (gb.SPRING_HOLIDAY, 2018, d(2018, 5, 28), d(2018, 5, 28)),
    (gb.SPRING_HOLIDAY, 2019, d(2019, 5, 27), d(2019, 5, 27)),
    (gb.SPRING_HOLIDAY, 2020, d(2020, 5, 25), d(2020, 5, 25)),
    (gb.SPRING_HOLIDAY, 2021, d(2021, 5, 31), d(2021, 5, 31)),
    (gb.SPRING_HOLIDAY, 2022, None, None),
    (gb.SPRING_HOLIDAY, 2023, d(2023, 5, 29), d(2023, 5, 29)),
    (gb.SPRING_HOLIDAY_2022, 2021, None, None),
    (gb.SPRING_HOLIDAY_2022, 2022, d(2022, 6, 2), d(2022, 6, 2)),
    (gb.SPRING_HOLIDAY_2022, 2023, None, None),
    (gb.PLATINUM_JUBILEE, 2021, None, None),
    (gb.PLATINUM_JUBILEE, 2022, d(2022, 6, 3), d(2022, 6, 3)),
    (gb.PLATINUM_JUBILEE, 2023, None, None),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2015, d(2015, 8, 3), d(2015, 8, 3)),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2016, d(2016, 8, 1), d(2016, 8, 1)),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2017, d(2017, 8, 7), d(2017, 8, 7)),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2018, d(2018, 8, 6), d(2018, 8, 6)),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2019, d(2019, 8, 5), d(2019, 8, 5)),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2020, d(2020, 8, 3), d(2020, 8, 3)),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2021, d(2021, 8, 2), d(2021, 8, 2)),
    (gb.SUMMER_HOLIDAY_SCOTLAND, 2022, d(2022, 8, 1), d(2022, 8, 1)),
    (gb.SUMMER_HOLIDAY, 2015, d(2015, 8, 31), d(2015, 8, 31)),
    (gb.SUMMER_HOLIDAY, 2016, d(2016, 8, 29), d(2016, 8, 29)),
    (gb.SUMMER_HOLIDAY, 2017, d(2017, 8, 28), d(2017, 8, 28)),
    (gb.SUMMER_HOLIDAY, 2018, d(2018, 8, 27), d(2018, 8, 27)),
    (gb.SUMMER_HOLIDAY, 2019, d(2019, 8, 26), d(2019, 8, 26)),
    (gb.SUMMER_HOLIDAY, 2020, d(2020, 8, 31), d(2020, 8, 31)),
    (gb.SUMMER_HOLIDAY, 2021, d(2021, 8, 30), d(2021, 8, 30)),
    (gb.SUMMER_HOLIDAY, 2022, d(2022, 8, 29), d(2022, 8, 29)),
    (gb.CHRISTMAS_DAY, 2015, d(2015, 12, 25), d(2015, 12, 25)),
    (gb.CHRISTMAS_DAY, 2016, d(2016, 12, 25), d(2016, 12, 26)),
    (gb.CHRISTMAS_DAY, 2017, d(2017, 12, 25), d(2017, 12, 25)),
    (gb.CHRISTMAS_DAY, 2018, d(2018, 12, 25), d(2018, 12, 25)),
    (gb.CHRISTMAS_DAY, 2019, d(2019, 12, 25), d(2019, 12, 25)),
    (gb.CHRISTMAS_DAY, 2020, d(2020, 12, 25), d(2020, 12, 25)),
    (gb.CHRISTMAS_DAY, 2021, d(2021, 12, 25), d(2021, 12, 27)),
    (gb.CHRISTMAS_DAY, 2022, d(2022, 12, 25), d(2022, 12, 26)),
    (gb.BOXING_DAY, 2015, d(2015, 12, 26), d(2015, 12, 28)),
    (gb.BOXING_DAY, 2016, d(2016, 12, 26), d(2016, 12, 27)),
    (gb.BOXING_DAY, 2017, d(2017, 12, 26), d(2017, 12, 26)),
    (gb.BOXING_DAY, 2018, d(2018, 12, 26), d(2018, 12, 26)),
    (gb.BOXING_DAY, 2019, d(2019, 12, 26), d(2019, 12, 26)),
    (gb.BOXING_DAY, 2020, d(2020, 12, 26), d(2020, 12, 28)),
    (gb.BOXING_DAY, 2021, d(2021, 12, 26), d(2021, 12, 28)),
    (gb.BOXING_DAY, 2022, d(2022, 12, 26), d(2022, 12, 27)),
]


@pytest.mark.parametrize("holiday, year, want_act, want_obs", CASES)
def test_holidays(holiday, year, want_act, want_obs):
    assert Holiday.calc(holiday, year) == (want_act, want_obs)


def test_scottish_summer_holiday_not_in_national_list():
    assert gb.SUMMER_HOLIDAY_SCOTLAND not in gb.HOLIDAYS
    assert len(gb.HOLIDAYS) == 11
    national_days = [Holiday.calc(h, 2022)[0] for h in gb.HOLIDAYS]
    assert gb.SUMMER_HOLIDAY_SCOTLAND.calc(2022)[0] == d(2022, 8, 1)
    assert d(2022, 8, 1) not in national_days
    assert d(2022, 8, 29) in national_days
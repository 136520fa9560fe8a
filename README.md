# holical

Holiday definitions and calculations for a number of European countries,
their regions, and the European Central Bank.

Each holiday knows how to work out the day it falls on in a given year, the
years it applies to, and any substitution rule that moves its observance
(for example, a British bank holiday falling on a Saturday is observed on the
following Monday). All calculations use the Gregorian calendar and return
`datetime.date` values.

## Installation

```
pip install holical
```

## Usage

```python
from holical import gb

actual, observed = gb.CHRISTMAS_DAY.calc(2021)
print(actual, observed)   # 2021-12-25 2021-12-27
```

`Holiday.calc(year)` returns the actual and observed dates for that year.
When a holiday does not apply in the year (before its start year, after its
end year, in an exception year, when it has no calculation function, or when
its rule finds no day) both values are `None`.

Each country module provides its individual holidays as upper-case constants
and a `HOLIDAYS` list of the standard national holidays. Some also provide
regional lists, such as `de.HOLIDAYS_BY` for Bavaria or `ch.HOLIDAYS_ZH` for
the canton of Zurich.

Available modules: `ch`, `cz`, `de`, `dk`, `ecb`, `es`, `fr`, `gb`, `gr`,
`ie`, `it`, plus `holiday` with the building blocks.

### Defining your own holidays

```python
from holical.holiday import AltDay, Holiday, ObservanceType, calc_day_of_month

founders_day = Holiday(
    name="Founders' Day",
    type=ObservanceType.OTHER,
    month=3,
    day=14,
    func=calc_day_of_month,
    observed=[AltDay(day=5, offset=2), AltDay(day=6, offset=1)],
)
```

Weekdays are numbered as in the `calendar` module: Monday is 0 and Sunday is
6. `Holiday` is an immutable dataclass; lists given for `except_years` and
`observed` are stored as tuples.

The built-in rules in `holical.holiday` are:

- `calc_day_of_month` – a fixed day of a month (a day past the end of the
  month rolls over into the next)
- `calc_weekday_offset` – the nth weekday of a month, or with a negative
  offset the nth-last; `None` for an offset of 0 or a day outside the month
- `calc_weekday_from` – the nth weekday on or after a given date, or with a
  negative offset on or before it; `None` for an offset of 0
- `calc_easter_offset` – a number of days from Western Easter or, with
  `julian=True`, Orthodox Easter

`holical.ie` adds `calc_if_first_falls_on_friday`, which gives the 1st of the
month when it is a Friday and otherwise the nth weekday of the month.

A holiday's `calc_offset` shifts the calculated day before substitution rules
are applied.

An existing holiday can be reused under another name or type with
`Holiday.clone(name=..., type=...)`. Only `name`, `description`, `type`,
`start_year`, `end_year`, `except_years` and `observed` may be overridden;
empty strings, `ObservanceType.UNKNOWN`, years not above zero and `None`
keep the original value, and any other field name raises `TypeError`.

## What it does not do

The package defines holidays and works out their dates. It has no business
calendar: it does not decide whether a given date is a holiday across a list
of holidays, count or add work days, or handle working hours.

## Running the tests

```
pip install -e ".[test]"
pytest
```
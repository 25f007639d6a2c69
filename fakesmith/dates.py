"""Random dates, times and calendar names."""

from __future__ import annotations

import datetime as _dt

from fakesmith.numbers import number

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

_EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)
_MICROSECOND = _dt.timedelta(microseconds=1)


def _to_nanoseconds(moment: _dt.datetime) -> int:
    """Nanoseconds since the epoch; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=_dt.timezone.utc)
    return ((moment - _EPOCH) // _MICROSECOND) * 1000


def _from_nanoseconds(nanoseconds: int) -> _dt.datetime:
    return _EPOCH + _dt.timedelta(microseconds=nanoseconds // 1000)


def date() -> _dt.datetime:
    """Return a random UTC datetime from 1900 up to the current year.

    The month is drawn from 0 to 12 and the day from 1 to 31; out-of-range
    values roll over into the neighbouring month or year.
    """
    year_value = year()
    month_value = number(0, 12)
    day_value = day()
    hour_value = hour()
    minute_value = minute()
    second_value = second()
    nanosecond_value = nanosecond()

    year_shift, month_index = divmod(month_value - 1, 12)
    first_of_month = _dt.datetime(
        year_value + year_shift, month_index + 1, 1, tzinfo=_dt.timezone.utc
    )
    return first_of_month + _dt.timedelta(
        days=day_value - 1,
        hours=hour_value,
        minutes=minute_value,
        seconds=second_value,
        microseconds=nanosecond_value // 1000,
    )


def date_range(start: _dt.datetime, end: _dt.datetime) -> _dt.datetime:
    """Return a random UTC datetime between start and end inclusive.

    Raises ValueError if start is later than end.
    """
    return _from_nanoseconds(number(_to_nanoseconds(start), _to_nanoseconds(end)))


def month() -> str:
    """Return a random month name."""
    return MONTH_NAMES[number(1, 12) - 1]


def day() -> int:
    """Return a random day of the month in [1, 31]."""
    return number(1, 31)


def weekday() -> str:
    """Return a random weekday name (Sunday to Saturday)."""
    return WEEKDAY_NAMES[number(0, 6)]


def year() -> int:
    """Return a random year from 1900 to the current year."""
    return number(1900, _dt.datetime.now().year)


def hour() -> int:
    """Return a random hour in [0, 23]."""
    return number(0, 23)


def minute() -> int:
    """Return a random minute in [0, 59]."""
    return number(0, 59)


def second() -> int:
    """Return a random second in [0, 59]."""
    return number(0, 59)


def nanosecond() -> int:
    """Return a random nanosecond in [0, 999999999]."""
    return number(0, 999_999_999)
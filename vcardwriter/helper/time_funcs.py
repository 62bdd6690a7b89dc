import datetime as dt

from dateutil import tz

utc = tz.tzutc()


def num_to_digits(num: int, places: int) -> str:
    return f"{num:0{places}d}"


def format_date(date: dt.date) -> str:
    """
    YYYY-MM-DD from the value's own calendar fields.

    Aware datetimes are not converted, the caller's date is kept as given.
    """
    return "-".join((num_to_digits(date.year, 4), num_to_digits(date.month, 2), num_to_digits(date.day, 2)))


def format_date_time(date_time: dt.datetime) -> str:
    """
    YYYY-MM-DDTHH:MM:SSZ, always in UTC.

    Naive datetimes are taken to already be in UTC, a plain date is midnight UTC.
    """
    if not isinstance(date_time, dt.datetime):
        date_time = dt.datetime(date_time.year, date_time.month, date_time.day)
    if date_time.tzinfo is None:
        date_time = date_time.replace(tzinfo=utc)
    date_time = date_time.astimezone(utc)
    return f"{format_date(date_time)}T{date_time:%H:%M:%S}Z"

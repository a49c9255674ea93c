import iso8601
from datetime import datetime, timedelta, UTC
from dateutil import parser as dtparser
from typing import Optional

from dynaqs.constant import RX_NUMBER, RX_INTEGER_PREFIX, RX_ISO_DATE_PREFIX

EPOCH = datetime.fromtimestamp(0, UTC)
EPOCH_SECONDS_LENGTH = 10


def epoch_to_datetime(value: str) -> Optional[datetime]:
    ''' Converts a numeric string to a datetime. Ten characters long values are
        epoch seconds, everything else is epoch milliseconds. Fractions are
        truncated.
    '''
    if len(value) == EPOCH_SECONDS_LENGTH:
        value = f"{value}000"

    try:
        millis = int(RX_INTEGER_PREFIX.match(value).group())
        return EPOCH + timedelta(milliseconds=millis)
    except (ValueError, OverflowError):
        return None


def str_to_datetime(value: str) -> datetime:
    ''' ISO-8601 first, then any calendar date dateutil understands.
        ISO shaped strings (YYYY-MM-DD...) are not handed over to dateutil,
        it would otherwise read "2021-13-01" as the 13th of January.
    '''
    value = value.strip()
    if not value.isascii():
        raise ValueError(f"Not a date string: {value!r}")

    try:
        return iso8601.parse_date(value, default_timezone=UTC)
    except iso8601.ParseError:
        if RX_ISO_DATE_PREFIX.match(value):
            raise

    dt = dtparser.parse(value)
    return dt if dt.tzinfo else dt.replace(tzinfo=UTC)


def parse_date(value) -> Optional[datetime]:
    ''' Parses an epoch timestamp or a calendar date string into a UTC datetime.
        Returns None for anything that is not a valid date.
    '''
    if not isinstance(value, str):
        return None

    if RX_NUMBER.match(value):
        return epoch_to_datetime(value)

    try:
        return str_to_datetime(value).astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def datetime_to_isostring(dt: datetime) -> str:
    ''' ISO-8601 string of a UTC datetime with millisecond precision, e.g. 2021-01-01T00:00:00.000Z '''
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}T"
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond // 1000:03d}Z"
    )

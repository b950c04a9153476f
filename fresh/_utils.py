from __future__ import annotations

import calendar
import math
import typing as tp
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_tz

HEADERS_ENCODING = "iso-8859-1"


def _parse_iso_date(date: str) -> tp.Optional[float]:
    if date.endswith(("Z", "z")):
        date = date[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(date)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return float(calendar.timegm(parsed.utctimetuple()) * 1000 + parsed.microsecond // 1000)


def parse_http_date(date: tp.Optional[str]) -> float:
    """
    Parse an HTTP date into milliseconds since the epoch.

    IMF-fixdate, RFC 850 and asctime dates are accepted, as well as
    ISO 8601 timestamps. Dates without a zone are read as UTC.

    Args:
        date: The header value, may be None or empty.

    Returns:
        The timestamp in milliseconds, or ``math.nan`` when the value
        cannot be parsed. Callers must check with ``math.isnan`` before
        comparing.

    Examples:
        >>> parse_http_date("Sat, 01 Jan 2000 00:00:00 GMT")
        946684800000.0
        >>> math.isnan(parse_http_date("yesterday"))
        True
    """
    if not date:
        return math.nan

    try:
        timestamp = _parse_iso_date(date)
        if timestamp is not None:
            return timestamp

        parsed = parsedate_tz(date)
        if parsed is None:
            return math.nan
        # datetime rejects out-of-range fields that timegm would roll over
        moment = datetime(*parsed[:6], tzinfo=timezone(timedelta(seconds=parsed[9] or 0)))
        return float(calendar.timegm(moment.utctimetuple()) * 1000)
    except (TypeError, ValueError, IndexError, OverflowError):
        return math.nan

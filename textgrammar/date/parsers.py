from __future__ import annotations

import calendar
import logging
import re

from ..result import NOT_FOUND, Found, ScanResult, require_text
from .types import DatePolicy, ParsedDate

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

# [Wdy, ]DD-Mon-[CC]YY HH:MM:SS[ GMT], spaces or dashes between date parts.
DATE_RE = re.compile(
    r"(?:[a-z]{3},[ \t]+)?"
    r"(?P<day>[0-9]{2})(?:-|[ \t]+)"
    r"(?P<month>" + "|".join(MONTH_ABBREVIATIONS) + r")(?:-|[ \t]+)"
    r"(?P<century>[0-9]{2})?(?P<yy>[0-9]{2})[ \t]+"
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:[ \t]+gmt)?",
    re.IGNORECASE | re.ASCII,
)


def _in_range(d: ParsedDate) -> bool:
    if d.hour > 23 or d.minute > 59 or d.second > 59:
        return False
    if d.year < 1:
        return False
    return 1 <= d.day <= calendar.monthrange(d.year, d.month_number)[1]


def parse_date(text: str, policy: DatePolicy | None = None) -> ScanResult[ParsedDate]:
    """Parse a cookie-style date string; the whole input must match.

    Accepts "Sat, 01-Jan-2022 23:59:59 GMT" and its variants: no weekday,
    spaces instead of dashes, any month case, two-digit year, no "GMT",
    repeated whitespace. The day is always two digits.
    """
    require_text(text)
    policy = policy or DatePolicy()

    m = DATE_RE.fullmatch(text)
    if not m:
        return NOT_FOUND

    if m.group("century") is not None:
        year = int(m.group("century") + m.group("yy"))
    else:
        yy = int(m.group("yy"))
        year = yy + (1900 if yy >= policy.two_digit_pivot else 2000)

    d = ParsedDate(
        year=year,
        month=MONTH_ABBREVIATIONS.index(m.group("month").lower()),
        day=int(m.group("day")),
        hour=int(m.group("hour")),
        minute=int(m.group("minute")),
        second=int(m.group("second")),
    )

    if policy.validate_ranges and not _in_range(d):
        logger.debug("date %r is out of range", text)
        return NOT_FOUND
    return Found(d)

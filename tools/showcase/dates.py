"""
Friendly display strings for the free-text `date` field of a project.

Examples handled:
- "Aug 8-11, 2025"  -> "Aug 8-11th 2025"
- "Sep - Nov, 2024" -> "Sep-Nov 2024"
- "Nov 23, 2024"    -> "Nov 23rd 2024"
- "May 2024"        -> "May 2024"
- "2024"            -> "2024"
- "" or None        -> ""

Anything else goes through dateutil, and is echoed back when that fails too.
"""

from __future__ import annotations

from typing import Optional, Tuple

from dateutil import parser as dateparser

from .config import (
    DASH_RE,
    DAY_RANGE,
    FALLBACK_DATE_ALT_DEFAULT,
    FALLBACK_DATE_DEFAULT,
    FULL_DATE_RANGE,
    MONTH_COMMA_YEAR,
    MONTH_NAMES,
    MONTH_RANGE_COMMA_YEAR,
    MONTH_RANGE_YEAR,
    MONTH_YEAR,
    MONTH_YEAR_RANGE,
    MONTH_YEAR_TO_FULL_DATE,
    MONTHS,
    RANGE_SEP,
    SINGLE_DATE,
    SORT_DAY_RE,
    SORT_YEAR_RE,
    YEAR_ONLY,
)

_MONTH_TOKENS = {
    token: abbr
    for name, abbr in zip(MONTH_NAMES, MONTHS)
    for token in (name, name[:3])
}
_MONTH_TOKENS["sept"] = "Sep"


def ordinal(n: int) -> str:
    rem10, rem100 = n % 10, n % 100
    if rem10 == 1 and rem100 != 11:
        return f"{n}st"
    if rem10 == 2 and rem100 != 12:
        return f"{n}nd"
    if rem10 == 3 and rem100 != 13:
        return f"{n}rd"
    return f"{n}th"


def month_abbr(token: str) -> str:
    """"november" -> "Nov"; tokens that are not month names are kept as is."""
    return _MONTH_TOKENS.get(token.lower(), token)


def _generic(s: str) -> Optional[str]:
    try:
        dt = dateparser.parse(s, default=FALLBACK_DATE_DEFAULT)
        alt = dateparser.parse(s, default=FALLBACK_DATE_ALT_DEFAULT)
    except (ValueError, OverflowError):
        return None
    # No year in the text ("10:30", "3rd"): not a date.
    if dt.year != alt.year:
        return None
    return f"{MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


def format_date(value: Optional[str]) -> str:
    raw = (value or "").strip()
    if not raw:
        return ""

    sep = RANGE_SEP
    s = DASH_RE.sub("-", raw)

    m = MONTH_RANGE_COMMA_YEAR.match(s) or MONTH_RANGE_YEAR.match(s)
    if m:
        mon1, mon2, y = m.groups()
        return f"{month_abbr(mon1)}{sep}{month_abbr(mon2)} {y}"

    m = FULL_DATE_RANGE.match(s)
    if m:
        mon1, d1, y1, mon2, d2, y2 = m.groups()
        return (
            f"{month_abbr(mon1)} {ordinal(int(d1))} {y1} {sep} "
            f"{month_abbr(mon2)} {ordinal(int(d2))} {y2}"
        )

    m = MONTH_YEAR_RANGE.match(s)
    if m:
        mon1, y1, mon2, y2 = m.groups()
        return f"{month_abbr(mon1)} {y1} {sep} {month_abbr(mon2)} {y2}"

    m = MONTH_YEAR_TO_FULL_DATE.match(s)
    if m:
        mon1, y1, mon2, d2, y2 = m.groups()
        return (
            f"{month_abbr(mon1)} {y1} {sep} "
            f"{month_abbr(mon2)} {ordinal(int(d2))} {y2}"
        )

    m = DAY_RANGE.match(s)
    if m:
        mon, d1, d2, y = m.groups()
        return f"{month_abbr(mon)} {d1}{sep}{ordinal(int(d2))} {y}"

    m = SINGLE_DATE.match(s)
    if m:
        mon, d, y = m.groups()
        return f"{month_abbr(mon)} {ordinal(int(d))} {y}"

    m = MONTH_COMMA_YEAR.match(s) or MONTH_YEAR.match(s)
    if m:
        mon, y = m.groups()
        return f"{month_abbr(mon)} {y}"

    m = YEAR_ONLY.match(s)
    if m:
        return m.group(1)

    return _generic(s) or raw


def date_sort_key(value: str) -> Tuple[int, int, int]:
    """
    Best-effort (year, month, day) of a free-text date, zeros where missing.

    Year is the first 20xx, month the first of Jan..Dec (in calendar order)
    found anywhere in the text, day the first one- or two-digit run.
    """
    m = SORT_YEAR_RE.search(value)
    year = int(m.group(1)) if m else 0

    month = 0
    for i, abbr in enumerate(MONTHS):
        if abbr in value:
            month = i
            break

    m = SORT_DAY_RE.search(value)
    day = int(m.group(1)) if m else 0
    return year, month, day

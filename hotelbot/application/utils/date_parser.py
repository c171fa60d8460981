from __future__ import annotations

import re
from datetime import datetime

from hotelbot.application.exceptions import DateRangeParseError
from hotelbot.domain.entities.date_range import DateRange

DATE_RANGE_PATTERN = re.compile(r"(\d{2}/\d{2}/\d{4})\s*-\s*(\d{2}/\d{2}/\d{4})")

INPUT_FORMAT = "%d/%m/%Y"
ISO_FORMAT = "%Y-%m-%d"


def parse_date_range(text: str) -> DateRange:
    """Find a `DD/MM/YYYY - DD/MM/YYYY` range anywhere in text.

    Returns ISO dates. Raises DateRangeParseError when the pattern is missing
    or either side is not a real calendar date. The order of the two dates is
    not checked.
    """
    match = DATE_RANGE_PATTERN.search(text or "")
    if not match:
        raise DateRangeParseError("no date range found", reason="no_match")

    start = _to_iso(match.group(1))
    end = _to_iso(match.group(2))
    return DateRange(start=start, end=end)


def _to_iso(value: str) -> str:
    try:
        parsed = datetime.strptime(value, INPUT_FORMAT)
    except ValueError as e:
        raise DateRangeParseError(f"invalid date: {value}", reason="invalid_date") from e
    return parsed.strftime(ISO_FORMAT)

"""Date helpers.

Naive datetimes are treated as UTC.
"""

import re
from datetime import UTC, date, datetime

from fnkit.domain.errors import InvalidArgumentError

_SECONDS_PER_DAY = 24 * 60 * 60
_JSON_DATE = re.compile(r"-?\d+")
_AMERICAN_FORMATS = ("%m/%d/%Y", "%m-%d-%Y")


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    return datetime(value.year, value.month, value.day, tzinfo=UTC)


def get_days_diff_between_dates(initial: date | datetime, final: date | datetime) -> float:
    """
    Difference in days between two dates, negative if ``final`` is earlier.

    Example:
        >>> get_days_diff_between_dates(date(2017, 12, 13), date(2017, 12, 22))
        9.0
    """
    delta = _as_datetime(final) - _as_datetime(initial)
    return delta.total_seconds() / _SECONDS_PER_DAY


def json_to_date(value: str) -> str:
    """
    Format a ``/Date(milliseconds)/`` JSON date as ``d/m/yyyy`` (UTC).

    Example:
        >>> json_to_date("/Date(1489525200000)/")
        '14/3/2017'
    """
    match = _JSON_DATE.search(value)
    if match is None:
        raise InvalidArgumentError(f"No timestamp found in {value!r}")
    moment = datetime.fromtimestamp(int(match.group()) / 1000, tz=UTC)
    return f"{moment.day}/{moment.month}/{moment.year}"


def to_english_date(value: str) -> str | None:
    """
    Convert an American ``mm/dd/yyyy`` (or ISO) date to ``dd/mm/yyyy``.

    Returns:
        The converted date, or None when ``value`` is not a recognisable date

    Example:
        >>> to_english_date("09/21/2010")
        '21/09/2010'
    """
    text = value.strip()
    for fmt in _AMERICAN_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt).date()
        except ValueError:
            continue
        return parsed.strftime("%d/%m/%Y")

    try:
        parsed = date.fromisoformat(text)
    except ValueError:
        return None
    return parsed.strftime("%d/%m/%Y")

"""Date parsing and rendering helpers."""

from datetime import date, datetime

from catalog.constants import MEDIUM_DATE_FORMAT, MONTH_ABBREVIATIONS


def parse_iso_date(value: str | date | None) -> date | None:
    """
    Parse an ISO-8601 date or datetime string into a date.

    Args:
        value: "YYYY-MM-DD", a full ISO-8601 timestamp, a date, or None.

    Returns:
        The calendar date, or None when value is empty.

    Raises:
        ValueError: If value is not a valid ISO-8601 date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Cannot parse {type(value).__name__} as a date")

    value = value.strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        # Timestamps such as "2024-01-05T10:00:00Z"
        return datetime.fromisoformat(value).date()


def format_medium_date(value: date | None) -> str:
    """
    Render a date as e.g. "Jan 5, 1775"; None renders as "".

    Month names are always English, whatever the process locale.
    """
    if value is None:
        return ""
    return MEDIUM_DATE_FORMAT.format(
        month=MONTH_ABBREVIATIONS[value.month - 1],
        day=value.day,
        year=value.year,
    )


def to_iso_date(value: date | None) -> str | None:
    """Render a date as "YYYY-MM-DD"; None stays None."""
    if value is None:
        return None
    return value.isoformat()

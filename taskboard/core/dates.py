# taskboard/core/dates.py

from datetime import datetime, timedelta, timezone


# Accepted wire formats for due dates, tried in order.
DUE_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%fZ",
)

DUE_DATE_FORMAT_ERROR = (
    "Invalid dueDate format. Expected format: yyyy-MM-dd or "
    "yyyy-MM-ddTHH:mm:ssZ (ISO 8601)."
)


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (the storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def day_bounds(value: datetime) -> tuple[datetime, datetime]:
    """Half-open [start, end) range covering the calendar day of ``value``."""
    start = datetime.combine(to_utc_naive(value).date(), datetime.min.time())
    return start, start + timedelta(days=1)


def parse_due_date(raw: str | None) -> datetime | None:
    """
    Parses a due date from one of DUE_DATE_FORMATS.
    Blank input means "no due date"; anything else unparseable raises ValueError.
    """
    if raw is None or not raw.strip():
        return None

    text = raw.strip()
    for fmt in DUE_DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        # Trailing Z means the value is already UTC
        return parsed

    raise ValueError(DUE_DATE_FORMAT_ERROR)

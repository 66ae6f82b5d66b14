from datetime import UTC, date, datetime

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
MONTH = 30 * DAY
YEAR = 365 * DAY

_UNITS = (
    ("year", YEAR),
    ("month", MONTH),
    ("day", DAY),
    ("hour", HOUR),
    ("minute", MINUTE),
)


def _as_utc(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    return datetime(value.year, value.month, value.day, tzinfo=UTC)


def relative_date(value: date | datetime, now: datetime | None = None) -> str:
    """Format *value* relative to *now*, e.g. ``"3 months ago"``.

    Uses the largest whole unit that fits. Months count as 30 days and
    years as 365 days. Dates in the future read ``"in 2 days"``.
    """
    current = _as_utc(now) if now is not None else datetime.now(UTC)
    seconds = int((current - _as_utc(value)).total_seconds())
    distance = abs(seconds)

    if distance < MINUTE:
        return "just now"

    for unit, size in _UNITS:
        count = distance // size
        if count >= 1:
            break

    label = unit if count == 1 else f"{unit}s"
    if seconds < 0:
        return f"in {count} {label}"
    return f"{count} {label} ago"

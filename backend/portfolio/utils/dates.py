from datetime import date, datetime, timezone
from dateutil.parser import isoparse
from portfolio.domain.invariants.exceptions import InvariantViolation


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def parse_datetime(value, field):
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return normalize_ts(value)
    try:
        return normalize_ts(isoparse(value))
    except (TypeError, ValueError) as exc:
        raise InvariantViolation(f"Invalid datetime for '{field}': {value}") from exc


def parse_date(value, field):
    if value in (None, ""):
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_datetime(value, field).date()


def isoformat(value):
    return value.isoformat() if value else None

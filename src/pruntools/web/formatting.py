"""Jinja2 filters for timestamps and numbers.

FIO timestamps come either as epoch milliseconds or as naive ISO strings
in UTC. Everything is displayed in UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone

from jinja2 import Environment


def to_datetime(value: int | float | datetime | None) -> datetime | None:
    """Epoch ms or datetime -> aware UTC datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def format_timestamp(value: int | float | datetime | None) -> str:
    """'Mar 30 2024 1:05:09 PM'."""
    dt = to_datetime(value)
    if dt is None:
        return ""
    hour = dt.hour % 12 or 12
    return f"{dt:%b} {dt.day} {dt.year} {hour}:{dt:%M:%S} {dt:%p}"


def format_iso(value: int | float | datetime | None) -> str:
    dt = to_datetime(value)
    return dt.isoformat(timespec="seconds") if dt else ""


def _span(seconds: int) -> str:
    if seconds < 45:
        return "a few seconds"
    minutes = round(seconds / 60)
    if minutes < 2:
        return "a minute"
    if minutes < 45:
        return f"{minutes} minutes"
    hours = round(seconds / 3600)
    if hours < 2:
        return "an hour"
    if hours < 22:
        return f"{hours} hours"
    days = round(seconds / 86400)
    if days < 2:
        return "a day"
    if days < 26:
        return f"{days} days"
    months = round(days / 30)
    if months < 2:
        return "a month"
    if months < 11:
        return f"{months} months"
    years = round(days / 365)
    return "a year" if years < 2 else f"{years} years"


def relative_time(
    value: int | float | datetime | None, now: datetime | None = None,
) -> str:
    """'3 hours ago' or 'in 20 minutes'."""
    dt = to_datetime(value)
    if dt is None:
        return ""
    now = now or datetime.now(timezone.utc)
    delta = int((now - dt).total_seconds())
    if delta >= 0:
        return f"{_span(delta)} ago"
    return f"in {_span(-delta)}"


def format_number(value: int | float | None, digits: int = 2) -> str:
    """Thousands separators; integers stay integral, None renders blank."""
    if value is None:
        return ""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.{digits}f}"


def register_filters(env: Environment) -> None:
    env.filters["timestamp"] = format_timestamp
    env.filters["iso"] = format_iso
    env.filters["fromnow"] = relative_time
    env.filters["number"] = format_number

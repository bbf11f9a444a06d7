"""Flight progress helpers for the shipping page."""

from __future__ import annotations

import time

from pruntools.models import FlightSegment


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def calculate_progress(
    departure_ms: int, arrival_ms: int, now: int | None = None,
) -> float:
    """Percentage of the departure→arrival interval elapsed, clamped to 0..100."""
    if now is None:
        now = now_ms()
    duration = arrival_ms - departure_ms
    if duration <= 0:
        return 100.0 if now >= departure_ms else 0.0
    progress = (now - departure_ms) / duration * 100
    return max(0.0, min(100.0, progress))


def is_segment_active(segment: FlightSegment, now: int | None = None) -> bool:
    """True while the segment is being flown."""
    if now is None:
        now = now_ms()
    return segment.departure_time_epoch_ms <= now <= segment.arrival_time_epoch_ms

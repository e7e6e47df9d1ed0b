"""LOTTT shift classification.

Clock times become whole minutes on an extended timeline: a shift that crosses
midnight ends past 1440, so 20:00-05:00 is the window [1200, 1740). Every
comparison is made in minutes; hours are only produced for the breakdown.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import clock_to_minutes, coerce_date
from ..core.constants import (
    DIURNAL_THRESHOLD_MINUTES,
    MINUTES_PER_DAY,
    MIXED_THRESHOLD_MINUTES,
    NOCTURNAL_BANDS,
    NOCTURNAL_THRESHOLD_MINUTES,
    PREDOMINANTLY_NOCTURNAL_MINUTES,
    REST_WEEKDAYS,
)
from ..core.enums import ShiftType
from .model import ShiftBreakdown


def _overlap(start: int, end: int, band_start: int, band_end: int) -> int:
    return max(0, min(end, band_end) - max(start, band_start))


def _hours(minutes: int) -> float:
    return minutes / 60


def night_minutes(start: int, end: int) -> int:
    """Minutes of [start, end) falling in the 19:00-05:00 band."""
    return sum(_overlap(start, end, lo, hi) for lo, hi in NOCTURNAL_BANDS)


def ordinary_minutes_threshold(shift_type: ShiftType) -> int:
    if shift_type is ShiftType.DIURNAL:
        return DIURNAL_THRESHOLD_MINUTES
    if shift_type is ShiftType.MIXED:
        return MIXED_THRESHOLD_MINUTES
    if shift_type is ShiftType.NOCTURNAL:
        return NOCTURNAL_THRESHOLD_MINUTES
    raise ValueError(f"Unknown shift type: {shift_type!r}")


def is_rest_day(work_date: Union[date, str, None]) -> bool:
    d = coerce_date(work_date)
    return d is not None and d.weekday() in REST_WEEKDAYS


def classify_shift(
    clock_in: Optional[str],
    clock_out: Optional[str],
    work_date: Union[date, str, None],
) -> ShiftBreakdown:
    """Split one attendance record into LOTTT hour categories.

    Missing or unparseable times give an all-zero breakdown.
    """
    start = clock_to_minutes(clock_in)
    end = clock_to_minutes(clock_out)
    if start is None or end is None:
        return ShiftBreakdown()

    if end < start:
        end += MINUTES_PER_DAY
    duration = max(0, end - start)

    real_night = night_minutes(start, end)
    if real_night > PREDOMINANTLY_NOCTURNAL_MINUTES:
        shift_type = ShiftType.NOCTURNAL
        premium = duration
    elif real_night > 0:
        shift_type = ShiftType.MIXED
        premium = real_night
    else:
        shift_type = ShiftType.DIURNAL
        premium = 0

    if is_rest_day(work_date):
        return ShiftBreakdown(
            rest_day_hours=_hours(duration),
            night_premium_hours=_hours(premium),
            shift_type=shift_type,
            duration=_hours(duration),
        )

    threshold = ordinary_minutes_threshold(shift_type)
    if duration <= threshold:
        return ShiftBreakdown(
            normal_hours=_hours(duration),
            night_premium_hours=_hours(premium),
            shift_type=shift_type,
            duration=_hours(duration),
        )

    overtime = duration - threshold
    night_overtime = night_minutes(start + threshold, end)
    return ShiftBreakdown(
        normal_hours=_hours(threshold),
        day_overtime_hours=_hours(max(0, overtime - night_overtime)),
        night_overtime_hours=_hours(night_overtime),
        night_premium_hours=_hours(premium),
        shift_type=shift_type,
        duration=_hours(duration),
    )

from __future__ import annotations

from enum import Enum, IntEnum


class AttendanceStatus(str, Enum):
    """Attendance status as stored by the attendance screens."""

    PRESENT = "present"
    ABSENT = "absent"
    MEDICAL_LEAVE = "medical-leave"
    VACATION = "vacation"


class ShiftType(str, Enum):
    """LOTTT working-day classification (art. 173)."""

    DIURNAL = "diurnal"
    MIXED = "mixed"
    NOCTURNAL = "nocturnal"


class PeriodHalf(IntEnum):
    """Semi-monthly pay run (quincena)."""

    FIRST = 1
    SECOND = 2

    @classmethod
    def for_day(cls, day: int) -> "PeriodHalf":
        return cls.FIRST if day <= 15 else cls.SECOND

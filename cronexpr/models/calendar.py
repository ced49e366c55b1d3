"""Symbolic month and weekday names.

Both enums are plain integers underneath, so a member can be passed anywhere
a field value or a CronTime component is expected.
"""

from __future__ import annotations

from enum import IntEnum

from cronexpr.errors import InvalidDayOfWeekError, InvalidMonthError


class Month(IntEnum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12

    @classmethod
    def from_int(cls, value: int) -> Month:
        """Convert 1-12 into a Month, raising InvalidMonthError otherwise."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidMonthError(value) from None


class DayOfWeek(IntEnum):
    SUN = 0
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6

    @classmethod
    def from_int(cls, value: int) -> DayOfWeek:
        """Convert 0-6 (Sunday=0) into a DayOfWeek."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidDayOfWeekError(value) from None

"""CronTime -- the resolved time components an expression is checked against."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

_Component = Annotated[int, Field(ge=0, le=255)]


class CronTime(BaseModel):
    """A point in time broken into the six cron components.

    The caller resolves timezones before building one of these. ``month`` is
    1-12 and ``day_of_week`` is 0-6 with Sunday as 0; Month and DayOfWeek
    members are accepted directly.
    """

    model_config = ConfigDict(frozen=True)

    second: _Component = 0
    minute: _Component = 0
    hour: _Component = 0
    day: _Component = 1
    month: _Component = 1
    day_of_week: _Component = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> CronTime:
        """Decompose a datetime as-is (no timezone conversion)."""
        return cls(
            second=dt.second,
            minute=dt.minute,
            hour=dt.hour,
            day=dt.day,
            month=dt.month,
            day_of_week=dt.isoweekday() % 7,  # 0=Sun, 6=Sat
        )

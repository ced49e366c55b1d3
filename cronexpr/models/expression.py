"""CronExpr -- a parsed six-field cron expression."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from cronexpr.formatter import format_expr
from cronexpr.models.cron_time import CronTime
from cronexpr.models.fields import AnyField, CronField

if TYPE_CHECKING:
    from cronexpr.config import ParserConfig

FIELD_NAMES: tuple[str, ...] = ("second", "minute", "hour", "day", "month", "day_of_week")

# Calendar domain of each field, only checked when the parser is asked to
FIELD_DOMAINS: dict[str, tuple[int, int]] = {
    "second": (0, 59),
    "minute": (0, 59),
    "hour": (0, 23),
    "day": (1, 31),
    "month": (1, 12),
    "day_of_week": (0, 6),
}


class CronExpr(BaseModel):
    """A six-field cron expression: second minute hour day month day_of_week.

    Immutable. Two expressions are equal only if every field has the same
    kind and payload, so ``1-5`` and ``1,2,3,4,5`` are different expressions
    even though they match the same values.

    Usage:
        expr = CronExpr.parse("0 */15 9-17 * * 1-5")
        expr.matches(datetime.now())
        str(expr)  # "0 */15 9-17 * * 1-5"
    """

    model_config = ConfigDict(frozen=True)

    second: CronField = Field(default_factory=AnyField)
    minute: CronField = Field(default_factory=AnyField)
    hour: CronField = Field(default_factory=AnyField)
    day: CronField = Field(default_factory=AnyField)
    month: CronField = Field(default_factory=AnyField)
    day_of_week: CronField = Field(default_factory=AnyField)

    @classmethod
    def parse(cls, text: str, config: ParserConfig | None = None) -> CronExpr:
        """Parse cron text. See cronexpr.parser.parse."""
        from cronexpr.parser import parse

        return parse(text, config)

    @property
    def all_fields(self) -> tuple[CronField, ...]:
        """The six fields in textual order."""
        return tuple(getattr(self, name) for name in FIELD_NAMES)

    def matches(self, time: CronTime | datetime) -> bool:
        """Check whether a time satisfies every field.

        Fields are checked in textual order and the check stops at the first
        field that does not match.
        """
        if isinstance(time, datetime):
            time = CronTime.from_datetime(time)

        return (
            self.second.matches(time.second)
            and self.minute.matches(time.minute)
            and self.hour.matches(time.hour)
            and self.day.matches(time.day)
            and self.month.matches(time.month)
            and self.day_of_week.matches(time.day_of_week)
        )

    def to_text(self) -> str:
        """Canonical text form; parses back to an equal expression."""
        return format_expr(self)

    def __str__(self) -> str:
        return self.to_text()

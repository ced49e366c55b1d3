"""cronexpr -- six-field cron expressions: parse, match, format.

    >>> from cronexpr import CronExpr, CronTime
    >>> expr = CronExpr.parse("30 0-30/5 13-15,18 * * 1-5")
    >>> expr.matches(CronTime(second=30, minute=10, hour=14, day=3, month=5, day_of_week=2))
    True
    >>> str(expr)
    '30 0-30/5 13-15,18 * * 1-5'
"""

from cronexpr.errors import (
    CronParseError,
    DescendingRangeError,
    EmptyExpressionError,
    FieldParseError,
    IncompleteExpressionError,
    InvalidDayOfWeekError,
    InvalidMonthError,
    InvalidStepError,
    ParseErrorKind,
    TooManyFieldsError,
)
from cronexpr.models import (
    AnyField,
    CronExpr,
    CronField,
    CronTime,
    DayOfWeek,
    ListField,
    Month,
    RangeField,
    StepField,
    ValueField,
)
from cronexpr.config import ParserConfig
from cronexpr.formatter import format_expr, format_field
from cronexpr.parser import is_valid, parse, parse_field
from cronexpr.serialization import CronExpression

__all__ = [
    "CronExpr",
    "CronTime",
    "CronField",
    "AnyField",
    "ValueField",
    "RangeField",
    "ListField",
    "StepField",
    "Month",
    "DayOfWeek",
    "ParserConfig",
    "parse",
    "parse_field",
    "is_valid",
    "format_expr",
    "format_field",
    "CronExpression",
    "CronParseError",
    "ParseErrorKind",
    "EmptyExpressionError",
    "IncompleteExpressionError",
    "TooManyFieldsError",
    "FieldParseError",
    "InvalidStepError",
    "DescendingRangeError",
    "InvalidMonthError",
    "InvalidDayOfWeekError",
]

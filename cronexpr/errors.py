"""Error types raised while parsing cron expressions.

Matching and formatting never fail; every error here is raised by the parser
or by the calendar enum conversions.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Machine-readable category of a parse failure."""

    EMPTY = "empty"
    INCOMPLETE = "incomplete"
    TOO_MANY_FIELDS = "too_many_fields"
    FIELD = "field"
    INVALID_STEP = "invalid_step"
    DESCENDING_RANGE = "descending_range"


class CronParseError(ValueError):
    """Base class for all cron expression parse failures.

    Concrete subclasses set ``kind``; the base leaves it unset.
    """

    kind: ParseErrorKind | None = None

    def __init__(self, message: str, expression: str = "") -> None:
        self.expression = expression
        super().__init__(message)


class EmptyExpressionError(CronParseError):
    kind = ParseErrorKind.EMPTY

    def __init__(self, expression: str = "") -> None:
        super().__init__("Cron expression is empty", expression)


class IncompleteExpressionError(CronParseError):
    kind = ParseErrorKind.INCOMPLETE

    def __init__(self, expression: str, found: int) -> None:
        self.found = found
        super().__init__(
            f"Invalid cron expression (need 6 fields, got {found}): {expression!r}",
            expression,
        )


class TooManyFieldsError(CronParseError):
    kind = ParseErrorKind.TOO_MANY_FIELDS

    def __init__(self, expression: str, found: int) -> None:
        self.found = found
        super().__init__(
            f"Invalid cron expression (need 6 fields, got {found}): {expression!r}",
            expression,
        )


class FieldParseError(CronParseError):
    """A single token did not match the field grammar.

    Attributes:
        token: The raw token text.
        index: Position of the field (0 = second ... 5 = day_of_week),
            or -1 when the token was parsed on its own.
        field_name: Name of the field, empty when unknown.
    """

    kind = ParseErrorKind.FIELD
    reason = ""

    def __init__(
        self,
        token: str,
        index: int = -1,
        field_name: str = "",
        expression: str = "",
        reason: str = "",
    ) -> None:
        self.token = token
        self.index = index
        self.field_name = field_name
        if reason:
            self.reason = reason

        where = f" in {field_name} field" if field_name else ""
        message = f"Invalid cron field{where}: {token!r}"
        if self.reason:
            message = f"{message} ({self.reason})"
        super().__init__(message, expression)


class InvalidStepError(FieldParseError):
    kind = ParseErrorKind.INVALID_STEP
    reason = "step must be greater than zero"


class DescendingRangeError(FieldParseError):
    kind = ParseErrorKind.DESCENDING_RANGE
    reason = "range start is greater than its end"


class InvalidMonthError(ValueError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Invalid month number: {value!r} (expected 1-12)")


class InvalidDayOfWeekError(ValueError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Invalid day of week number: {value!r} (expected 0-6, Sunday=0)")

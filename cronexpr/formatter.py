"""Canonical text rendering of cron expressions.

Each field kind renders as the exact text the parser reads back into the
same kind:

    *           AnyField
    30          ValueField
    13-15       RangeField
    13-15,18    ListField
    */5         StepField over everything
    0-30/5      StepField over a range
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cronexpr.models.fields import AnyField, ListField, RangeField, StepField, ValueField

if TYPE_CHECKING:
    from cronexpr.models.expression import CronExpr
    from cronexpr.models.fields import CronField


def format_field(field: CronField) -> str:
    """Render a single field."""
    if isinstance(field, AnyField):
        return "*"
    if isinstance(field, ValueField):
        return str(int(field.value))
    if isinstance(field, RangeField):
        return f"{int(field.start)}-{int(field.end)}"
    if isinstance(field, ListField):
        return ",".join(format_field(item) for item in field.items)
    if isinstance(field, StepField):
        return f"{format_field(field.base)}/{int(field.step)}"
    raise TypeError(f"Unknown cron field type: {type(field).__name__}")


def format_expr(expr: CronExpr) -> str:
    """Render all six fields, separated by single spaces."""
    return " ".join(format_field(field) for field in expr.all_fields)

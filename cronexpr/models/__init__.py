"""Pydantic data models for cron expressions."""

from cronexpr.models.fields import (
    AnyField,
    CronField,
    FieldValue,
    ListField,
    ListItem,
    RangeField,
    StepBase,
    StepField,
    ValueField,
)
from cronexpr.models.calendar import DayOfWeek, Month
from cronexpr.models.cron_time import CronTime
from cronexpr.models.expression import FIELD_DOMAINS, FIELD_NAMES, CronExpr

__all__ = [
    "AnyField",
    "ValueField",
    "RangeField",
    "ListField",
    "StepField",
    "CronField",
    "FieldValue",
    "ListItem",
    "StepBase",
    "Month",
    "DayOfWeek",
    "CronTime",
    "CronExpr",
    "FIELD_NAMES",
    "FIELD_DOMAINS",
]

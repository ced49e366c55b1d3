"""Pydantic field type that stores a CronExpr as its canonical text.

Usage:
    class Task(BaseModel):
        name: str
        schedule: CronExpression

    task = Task(name="report", schedule="0 0 9 * * 1-5")
    task.schedule.matches(now)
    task.model_dump_json()  # {"name": "report", "schedule": "0 0 9 * * 1-5"}
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from cronexpr.models.expression import CronExpr
from cronexpr.parser import parse


def _validate(value: Any) -> CronExpr:
    if isinstance(value, CronExpr):
        return value
    if isinstance(value, str):
        # CronParseError is a ValueError, so pydantic reports it as a ValidationError
        return parse(value)
    raise ValueError(f"Expected a cron expression string, got {type(value).__name__}")


def _serialize(value: CronExpr) -> str:
    return value.to_text()


CronExpression = Annotated[
    CronExpr,
    PlainValidator(_validate),
    PlainSerializer(_serialize, return_type=str),
    WithJsonSchema({"type": "string", "format": "cron"}),
]

"""Tests for the CronExpression pydantic field type."""

from __future__ import annotations

import json

import pytest
from pydantic import BaseModel, ValidationError

from cronexpr import CronExpr, CronExpression, RangeField, parse


class Task(BaseModel):
    name: str
    schedule: CronExpression
    backup: CronExpression | None = None


class TestCronExpression:
    def test_validates_from_text(self):
        task = Task(name="report", schedule="0 0 9 * * 1-5")
        assert isinstance(task.schedule, CronExpr)
        assert task.schedule.day_of_week == RangeField(start=1, end=5)

    def test_accepts_instances(self):
        expr = parse("0 */5 * * * *")
        task = Task(name="poll", schedule=expr)
        assert task.schedule is expr

    def test_serializes_to_canonical_text(self):
        task = Task(name="report", schedule="0  0\t9 * * 1-5")
        assert task.model_dump() == {"name": "report", "schedule": "0 0 9 * * 1-5", "backup": None}
        assert json.loads(task.model_dump_json())["schedule"] == "0 0 9 * * 1-5"

    def test_json_round_trip(self):
        task = Task(name="report", schedule="30 0-30/5 13-15,18 * * 1-5", backup="0 0 12 * * *")
        assert Task.model_validate_json(task.model_dump_json()) == task

    def test_parse_errors_become_validation_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            Task(name="bad", schedule="* * *")
        assert "need 6 fields" in str(exc_info.value)

    def test_rejects_non_strings(self):
        with pytest.raises(ValidationError):
            Task(name="bad", schedule=5)

    def test_json_schema_is_a_string(self):
        schema = Task.model_json_schema()
        assert schema["properties"]["schedule"]["type"] == "string"
